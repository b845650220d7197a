from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import List, Optional

STATUS_TODO = "todo"
STATUS_IN_PROGRESS = "in-progress"
STATUS_DONE = "done"
STATUSES = (STATUS_TODO, STATUS_IN_PROGRESS, STATUS_DONE)

DEFAULT_ISSUE_TITLE = "Untitled"
DEFAULT_NODE_COLOR = "#2ecc71"


def iso_timestamp(moment: Optional[datetime] = None) -> str:
	"""UTC timestamp in the `YYYY-MM-DDTHH:MM:SS.mmmZ` form browsers produce."""
	if moment is None:
		moment = datetime.now(timezone.utc)
	moment = moment.astimezone(timezone.utc)
	return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


@dataclass
class Node:
	"""A vertex of the relationship graph."""
	id: str
	name: str
	color: Optional[str] = None
	x: Optional[float] = None
	y: Optional[float] = None

	def to_dict(self) -> dict:
		# Optional attributes are omitted rather than written as null
		return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class Link:
	source: str
	target: str

	def to_dict(self) -> dict:
		return asdict(self)


@dataclass
class Version:
	content: Optional[str]
	timestamp: str = field(default_factory=iso_timestamp)

	def to_dict(self) -> dict:
		# A missing body is left out of the record, not written as null
		if self.content is None:
			return {"timestamp": self.timestamp}
		return asdict(self)


@dataclass
class Document:
	"""
	A titled text artifact with an append-only version history.
	`currentVersion` always indexes the newest entry of `versions`.
	"""
	docId: str
	title: str
	versions: List[Version] = field(default_factory=list)
	currentVersion: int = 0

	def commit(self, content: Optional[str]) -> Version:
		version = Version(content)
		self.versions.append(version)
		self.currentVersion = len(self.versions) - 1
		return version

	def to_dict(self) -> dict:
		record = asdict(self)
		record["versions"] = [version.to_dict() for version in self.versions]
		return record


@dataclass
class Issue:
	issueId: str
	title: str = DEFAULT_ISSUE_TITLE
	description: str = ""
	status: str = STATUS_TODO

	@classmethod
	def create(cls, issue_id: str, title=None, description=None, status=None) -> 'Issue':
		"""Build an issue, replacing any empty field with its default."""
		return cls(
			issueId=issue_id,
			title=title or DEFAULT_ISSUE_TITLE,
			description=description or "",
			status=status or STATUS_TODO,
		)

	def to_dict(self) -> dict:
		return asdict(self)
