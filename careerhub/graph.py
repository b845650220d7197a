import logging
from typing import Callable, Dict, List, Optional, Tuple

from .ids import IdGenerator
from .models import Link, Node

logger = logging.getLogger(__name__)

RADIUS = 18

LinkPair = Tuple[str, str]


def _endpoint_id(endpoint) -> Optional[str]:
	"""A link endpoint may arrive as an id or as a whole node object."""
	if isinstance(endpoint, dict):
		return endpoint.get("id")
	return endpoint


class GraphEditor:
	"""
	Editing state for the relationship graph.

	Nodes are kept in an id-keyed lookup and links as `(source, target)` id
	pairs. Shift-click link editing is a two-state machine: `selected` is
	None while idle and holds a node id while a link endpoint is pending.
	"""

	def __init__(self, ids: Optional[IdGenerator] = None):
		self.ids = ids or IdGenerator()
		self.nodes: Dict[str, dict] = {}
		self.links: List[LinkPair] = []
		self.selected: Optional[str] = None

	@classmethod
	def from_payload(cls, data: Optional[dict], ids: Optional[IdGenerator] = None) -> 'GraphEditor':
		editor = cls(ids)
		data = data or {}
		for node in data.get("nodes") or []:
			if isinstance(node, dict):
				editor.nodes[node.get("id")] = dict(node)
		for link in data.get("links") or []:
			if not isinstance(link, dict):
				continue
			editor.links.append((_endpoint_id(link.get("source")), _endpoint_id(link.get("target"))))
		editor.ids.observe(editor.nodes)
		return editor

	def to_payload(self) -> dict:
		"""Plain `{nodes, links}` with string endpoints, ready to POST."""
		nodes = []
		for node in self.nodes.values():
			plain = {k: v for k, v in node.items() if k not in ("fx", "fy")}
			nodes.append(plain)
		return {
			"nodes": nodes,
			"links": [Link(source, target).to_dict() for source, target in self.links],
		}

	def add_node(self, name: str, color: Optional[str] = None, x: Optional[float] = None,
				 y: Optional[float] = None, node_id: Optional[str] = None) -> dict:
		if node_id is None:
			node_id = self.ids.next("n")
			while node_id in self.nodes:
				node_id = self.ids.next("n")
		node = Node(id=node_id, name=name, color=color, x=x, y=y).to_dict()
		self.nodes[node_id] = node
		return node

	def find_link(self, a: str, b: str) -> Optional[int]:
		"""Index of a link joining `a` and `b` in either direction."""
		for index, (source, target) in enumerate(self.links):
			if (source, target) in ((a, b), (b, a)):
				return index
		return None

	def toggle_link(self, a: str, b: str) -> bool:
		"""Remove the link between two nodes if present, else add it. True if added."""
		index = self.find_link(a, b)
		if index is not None:
			del self.links[index]
			return False
		self.links.append((a, b))
		return True

	def shift_click(self, node_id: str) -> str:
		if node_id not in self.nodes:
			raise KeyError(node_id)

		if self.selected is None:
			self.selected = node_id
			return "selected"

		if self.selected == node_id:
			self.selected = None
			return "deselected"

		added = self.toggle_link(self.selected, node_id)
		self.selected = None
		return "linked" if added else "unlinked"

	def delete_node(self, node_id: str, confirm: Callable[[str], bool]) -> bool:
		"""Remove a node and every link touching it, if `confirm` agrees."""
		node = self.nodes[node_id]
		if not confirm(node.get("name", "")):
			return False

		del self.nodes[node_id]
		self.links = [(s, t) for s, t in self.links if node_id not in (s, t)]
		if self.selected == node_id:
			self.selected = None
		logger.debug(f"Deleted node {node_id}")
		return True

	def drag(self, node_id: str, x: float, y: float, width: float, height: float) -> Tuple[float, float]:
		"""Pin a node at the pointer, kept inside the viewport."""
		node = self.nodes[node_id]
		x = max(RADIUS, min(width - RADIUS, x))
		y = max(RADIUS, min(height - RADIUS, y))
		node["x"] = node["fx"] = x
		node["y"] = node["fy"] = y
		return x, y

	def release(self, node_id: str):
		node = self.nodes[node_id]
		node.pop("fx", None)
		node.pop("fy", None)

	def neighbours(self, node_id: str) -> List[str]:
		result = []
		for source, target in self.links:
			if source == node_id:
				result.append(target)
			elif target == node_id:
				result.append(source)
		return result

	def dangling_links(self) -> List[LinkPair]:
		"""Links whose endpoints are missing from the node table."""
		return [(s, t) for s, t in self.links if s not in self.nodes or t not in self.nodes]
