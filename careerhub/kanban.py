import logging
from typing import Dict, List, Optional

from .client import CareerHubClient
from .models import STATUSES, STATUS_DONE, STATUS_TODO

logger = logging.getLogger(__name__)


def group_by_status(issues: List[dict]) -> Dict[str, List[dict]]:
	"""Split issues into the three columns. Unknown statuses land in done."""
	columns = {status: [] for status in STATUSES}
	for issue in issues:
		status = issue.get("status")
		columns[status if status in columns else STATUS_DONE].append(issue)
	return columns


class KanbanBoard:
	"""
	Three fixed status columns over the issue list.
	Every change goes to the server first and is followed by a full reload.
	"""

	def __init__(self, client: CareerHubClient):
		self.client = client
		self.issues: List[dict] = []

	def reload(self) -> List[dict]:
		self.issues = self.client.list_issues()
		return self.issues

	def columns(self) -> Dict[str, List[dict]]:
		return group_by_status(self.issues)

	def counters(self) -> Dict[str, int]:
		# Counted by exact status, so stray values are not tallied anywhere
		return {status: sum(1 for i in self.issues if i.get("status") == status) for status in STATUSES}

	def create(self, title: str, description: Optional[str] = None, status: str = STATUS_TODO) -> Optional[dict]:
		if not title:
			return None
		issue = self.client.create_issue(title, description, status)
		self.reload()
		return issue

	def drop(self, issue_id: str, status: str) -> dict:
		"""Move a card to another column."""
		issue = self.client.update_issue(issue_id, {"status": status})
		self.reload()
		return issue

	def delete(self, issue_id: str) -> dict:
		result = self.client.delete_issue(issue_id)
		if result.get("success"):
			self.reload()
		return result
