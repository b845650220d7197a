import copy
import json
import logging
import threading
from functools import wraps
from pathlib import Path
from typing import Any, Dict, List, Optional

from .ids import IdGenerator
from .models import Document, Issue, Version, STATUSES

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
	"""A referenced record does not exist."""
	message = "Not found"

	def __init__(self, identifier: Any = None):
		super().__init__(self.message if identifier is None else f"{self.message}: {identifier}")
		self.identifier = identifier


class DocumentNotFound(NotFoundError):
	message = "Document not found"


class IssueNotFound(NotFoundError):
	message = "Issue not found"


class VersionNotFound(NotFoundError):
	message = "Version not found"


def synchronized(f):
	"""Run a store method while holding the store lock."""
	@wraps(f)
	def decorated(self, *args, **kwargs):
		with self._lock:
			return f(self, *args, **kwargs)
	return decorated


class Store:
	"""
	The single aggregate of graph, documents and issues.

	Held in memory for the lifetime of the process and rewritten to one JSON
	file after every mutation. Each public operation holds the store lock for
	its whole read-modify-write-save cycle; values handed out are copies.
	"""

	def __init__(self, path: Path, data: Optional[dict] = None, ids: Optional[IdGenerator] = None):
		self.path = Path(path)
		self.data = self._normalize(data) if data is not None else self.empty_data()
		self.ids = ids or IdGenerator()
		self._lock = threading.RLock()
		self.ids.observe(self._known_ids())

	@staticmethod
	def empty_data() -> dict:
		return {
			"graphData": {"nodes": [], "links": []},
			"documents": [],
			"issues": [],
		}

	@classmethod
	def _normalize(cls, data: dict) -> dict:
		if not isinstance(data, dict):
			raise ValueError(f"Store root must be an object, got {type(data).__name__}")
		defaults = cls.empty_data()
		for key, value in defaults.items():
			if data.get(key) is None:
				data[key] = value
		return data

	@classmethod
	def load(cls, path, ids: Optional[IdGenerator] = None) -> 'Store':
		"""Load the store file, or start empty if it is absent or unreadable."""
		path = Path(path)
		if not path.exists():
			logger.info(f"No data file at {path}, starting with empty data")
			return cls(path, ids=ids)

		try:
			with open(path, 'r', encoding='utf-8') as f:
				data = cls._normalize(json.load(f))
			logger.info(f"Loaded existing data from {path}")
			return cls(path, data=data, ids=ids)
		except (json.JSONDecodeError, OSError, ValueError) as e:
			logger.warning(f"Error reading {path}, starting with empty data: {e}")
			return cls(path, ids=ids)

	def save(self):
		"""Overwrite the data file with the whole in-memory structure."""
		with self._lock:
			self.path.parent.mkdir(parents=True, exist_ok=True)
			with open(self.path, 'w', encoding='utf-8') as f:
				json.dump(self.data, f, indent=2, ensure_ascii=False)
			logger.debug(f"Data saved to {self.path}")

	def _known_ids(self) -> List[str]:
		known = []
		for doc in self.data["documents"]:
			if isinstance(doc, dict):
				known.append(doc.get("docId"))
		for issue in self.data["issues"]:
			if isinstance(issue, dict):
				known.append(issue.get("issueId"))
		return known

	# ============ Graph ============

	@synchronized
	def get_graph(self) -> dict:
		return copy.deepcopy(self.data["graphData"])

	@synchronized
	def replace_graph(self, graph: Any) -> Any:
		"""Store `graph` wholesale; its shape is not checked."""
		self.data["graphData"] = copy.deepcopy(graph)
		self.save()
		if isinstance(graph, dict):
			logger.info(
				f"Graph replaced ({len(graph.get('nodes') or [])} nodes, "
				f"{len(graph.get('links') or [])} links)"
			)
		return copy.deepcopy(self.data["graphData"])

	# ============ Documents ============

	def _find_document(self, doc_id: str) -> dict:
		for doc in self.data["documents"]:
			if isinstance(doc, dict) and doc.get("docId") == doc_id:
				return doc
		raise DocumentNotFound(doc_id)

	@synchronized
	def list_documents(self) -> List[dict]:
		return copy.deepcopy(self.data["documents"])

	@synchronized
	def get_document(self, doc_id: str) -> dict:
		return copy.deepcopy(self._find_document(doc_id))

	@synchronized
	def create_document(self, title: Optional[str], content: Optional[str]) -> dict:
		doc = Document(docId=self.ids.next("doc"), title=title)
		doc.commit(content)

		record = doc.to_dict()
		self.data["documents"].append(record)
		self.save()
		logger.info(f"Created document {doc.docId} ({title!r})")
		return copy.deepcopy(record)

	@synchronized
	def commit_document(self, doc_id: str, content: Optional[str]) -> dict:
		"""Append a version and point `currentVersion` at it."""
		record = self._find_document(doc_id)
		versions = record.setdefault("versions", [])

		versions.append(Version(content).to_dict())
		record["currentVersion"] = len(versions) - 1

		self.save()
		logger.info(f"Committed version {record['currentVersion']} of {doc_id}")
		return copy.deepcopy(record)

	@synchronized
	def get_document_version(self, doc_id: str, index: int) -> dict:
		record = self._find_document(doc_id)
		versions = record.get("versions") or []
		if index < 0 or index >= len(versions):
			raise VersionNotFound(f"{doc_id}@{index}")
		return {
			"docId": doc_id,
			"title": record.get("title"),
			"index": index,
			"version": copy.deepcopy(versions[index]),
		}

	# ============ Issues ============

	def _find_issue_index(self, issue_id: str) -> int:
		for index, issue in enumerate(self.data["issues"]):
			if isinstance(issue, dict) and issue.get("issueId") == issue_id:
				return index
		raise IssueNotFound(issue_id)

	@synchronized
	def list_issues(self) -> List[dict]:
		return copy.deepcopy(self.data["issues"])

	@synchronized
	def create_issue(self, title=None, description=None, status=None) -> dict:
		issue = Issue.create(self.ids.next("issue"), title, description, status)
		record = issue.to_dict()
		self.data["issues"].append(record)
		self.save()
		logger.info(f"Created issue {issue.issueId} ({issue.title!r}, {issue.status})")
		return copy.deepcopy(record)

	@synchronized
	def update_issue(self, issue_id: str, fields: Dict[str, Any]) -> dict:
		"""Shallow-merge `fields` into the issue, identifier included."""
		issue = self.data["issues"][self._find_issue_index(issue_id)]
		issue.update(copy.deepcopy(fields))
		self.save()
		logger.info(f"Updated issue {issue_id}: {sorted(fields)}")
		return copy.deepcopy(issue)

	@synchronized
	def delete_issue(self, issue_id: str) -> List[dict]:
		"""Remove the first issue with this id and return it in a list."""
		index = self._find_issue_index(issue_id)
		removed = [self.data["issues"].pop(index)]
		self.save()
		logger.info(f"Deleted issue {issue_id}")
		return removed

	# ============ Summary ============

	@synchronized
	def stats(self) -> dict:
		graph = self.data["graphData"]
		if not isinstance(graph, dict):
			graph = {}

		issues_by_status = {status: 0 for status in STATUSES}
		for issue in self.data["issues"]:
			status = issue.get("status") if isinstance(issue, dict) else None
			if not isinstance(status, str):
				status = str(status)
			issues_by_status[status] = issues_by_status.get(status, 0) + 1

		return {
			"nodes": len(graph.get("nodes") or []),
			"links": len(graph.get("links") or []),
			"documents": len(self.data["documents"]),
			"versions": sum(
				len(d.get("versions") or []) for d in self.data["documents"] if isinstance(d, dict)
			),
			"issues": len(self.data["issues"]),
			"issues_by_status": issues_by_status,
		}
