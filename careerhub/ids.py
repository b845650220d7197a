import re
import threading
import time
from typing import Callable, Iterable

_SUFFIX = re.compile(r"_(\d+)$")


class IdGenerator:
	"""
	Issues `<prefix>_<epoch millis>` identifiers.
	When the clock has not moved past the last issued value the counter is
	bumped by one, so two ids handed out in the same millisecond still differ.
	"""

	def __init__(self, clock: Callable[[], float] = time.time):
		self._clock = clock
		self._last = 0
		self._lock = threading.Lock()

	def next(self, prefix: str) -> str:
		with self._lock:
			millis = int(self._clock() * 1000)
			if millis <= self._last:
				millis = self._last + 1
			self._last = millis
			return f"{prefix}_{millis}"

	def observe(self, identifiers: Iterable[str]):
		"""Advance past any numeric suffix already in use."""
		with self._lock:
			for identifier in identifiers:
				if not isinstance(identifier, str):
					continue
				match = _SUFFIX.search(identifier)
				if match:
					self._last = max(self._last, int(match.group(1)))

	@property
	def last(self) -> int:
		return self._last
