import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://127.0.0.1:3000"


class ClientError(Exception):
	"""A request to the API failed, either on the network or with an error status."""

	def __init__(self, message: str, status: Optional[int] = None):
		super().__init__(message)
		self.status = status

	@property
	def not_found(self) -> bool:
		return self.status == 404


class CareerHubClient:
	"""Thin JSON client for the REST API. One attempt per call, no retries."""

	def __init__(self, base_url: str = DEFAULT_URL, session: Optional[requests.Session] = None, timeout: float = 30):
		self.base_url = base_url.rstrip("/")
		self.session = session or requests.Session()
		self.timeout = timeout
		self.session.headers.update({"Accept": "application/json"})

	def _request(self, method: str, path: str, **kwargs) -> Any:
		"""
		Issue a request and decode the JSON body.
		Network failures and error statuses are raised as ClientError.
		"""
		url = f"{self.base_url}{path}"
		kwargs.setdefault("timeout", self.timeout)
		try:
			resp = self.session.request(method, url, **kwargs)
		except requests.RequestException as e:
			logger.error(f"Request failed: {method} {url} - {e}")
			raise ClientError(f"Request failed: {e}") from e

		if resp.status_code >= 400:
			try:
				message = resp.json().get("error") or resp.reason
			except (ValueError, AttributeError):
				message = resp.reason or f"HTTP {resp.status_code}"
			logger.debug(f"{method} {url} -> {resp.status_code} {message}")
			raise ClientError(message, status=resp.status_code)

		try:
			return resp.json()
		except ValueError as e:
			raise ClientError(f"Invalid JSON from {url}: {e}", status=resp.status_code) from e

	def status(self) -> dict:
		return self._request("GET", "/api/status")

	# ============ Graph ============

	def get_graph(self) -> dict:
		return self._request("GET", "/api/graph")

	def save_graph(self, graph: dict) -> dict:
		return self._request("POST", "/api/graph", json=graph)

	# ============ Documents ============

	def list_documents(self) -> List[dict]:
		return self._request("GET", "/api/documents")

	def get_document(self, doc_id: str) -> dict:
		return self._request("GET", f"/api/documents/{doc_id}")

	def get_document_version(self, doc_id: str, index: int) -> dict:
		return self._request("GET", f"/api/documents/{doc_id}/versions/{index}")

	def create_document(self, title: str, content: str = "") -> dict:
		return self._request("POST", "/api/documents", json={"title": title, "content": content})

	def commit_document(self, doc_id: str, content: str) -> dict:
		return self._request("POST", f"/api/documents/{doc_id}/commit", json={"content": content})

	# ============ Issues ============

	def list_issues(self) -> List[dict]:
		return self._request("GET", "/api/issues")

	def create_issue(self, title: Optional[str] = None, description: Optional[str] = None,
					 status: Optional[str] = None) -> dict:
		body = {"title": title, "description": description, "status": status}
		return self._request("POST", "/api/issues", json={k: v for k, v in body.items() if v is not None})

	def update_issue(self, issue_id: str, fields: Dict[str, Any]) -> dict:
		return self._request("PUT", f"/api/issues/{issue_id}", json=fields)

	def delete_issue(self, issue_id: str) -> dict:
		return self._request("DELETE", f"/api/issues/{issue_id}")
