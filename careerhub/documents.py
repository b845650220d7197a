import logging
from typing import List, Optional

from .client import CareerHubClient

logger = logging.getLogger(__name__)


class NoDocumentSelected(Exception):
	pass


class DocumentSession:
	"""
	Document picker plus a single text buffer.
	Either no document is loaded (`current` is None, empty text) or one is,
	with `text` holding its newest version.
	"""

	def __init__(self, client: CareerHubClient):
		self.client = client
		self.documents: List[dict] = []
		self.current: Optional[dict] = None
		self.text = ""

	@property
	def loaded(self) -> bool:
		return self.current is not None

	def refresh(self) -> List[dict]:
		"""Reload the picker entries (id and title only)."""
		self.documents = [
			{"docId": doc.get("docId"), "title": doc.get("title")}
			for doc in self.client.list_documents()
		]
		return self.documents

	def select(self, doc_id: Optional[str]) -> Optional[dict]:
		if not doc_id:
			self.current = None
			self.text = ""
			return None

		doc = self.client.get_document(doc_id)
		self.current = doc
		self.text = latest_content(doc)
		return doc

	def create(self, title: str, content: str = "") -> Optional[dict]:
		"""Create a document and load it. A blank title does nothing."""
		if not title:
			return None
		doc = self.client.create_document(title, content)
		self.refresh()
		self.current = doc
		self.text = content
		return doc

	def commit(self, text: Optional[str] = None) -> dict:
		if self.current is None:
			raise NoDocumentSelected("No document selected.")
		if text is not None:
			self.text = text

		updated = self.client.commit_document(self.current["docId"], self.text)
		self.current = updated
		logger.info(f"Document committed. Version count: {len(updated.get('versions') or [])}")
		return updated

	def version(self, index: int) -> dict:
		if self.current is None:
			raise NoDocumentSelected("No document selected.")
		return self.client.get_document_version(self.current["docId"], index)


def latest_content(doc: dict) -> str:
	versions = doc.get("versions") or []
	index = doc.get("currentVersion", len(versions) - 1)
	if isinstance(index, int) and 0 <= index < len(versions):
		return versions[index].get("content") or ""
	return ""
