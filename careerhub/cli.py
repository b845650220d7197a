import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .client import CareerHubClient, ClientError, DEFAULT_URL
from .documents import DocumentSession
from .graph import GraphEditor
from .kanban import KanbanBoard
from .logger import setup_logging
from .models import STATUSES, STATUS_TODO

logger = logging.getLogger(__name__)

COLUMN_TITLES = {"todo": "To Do", "in-progress": "In Progress", "done": "Done"}


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="careerhub", description="Graph, documents and kanban in one page")
	parser.add_argument("--debug", action="store_true", help="Enable debug logging")
	parser.add_argument("--url", default=DEFAULT_URL, help="Server URL for client commands")
	sub = parser.add_subparsers(dest="command", required=True)

	serve = sub.add_parser("serve", help="Run the web server")
	serve.add_argument("--host", default="127.0.0.1", help="Server host")
	serve.add_argument("--port", type=int, default=3000, help="Server port")
	serve.add_argument("--data", default=None, help="Data file path (default: ./careerData.json)")

	sub.add_parser("status", help="Show store counts")

	graph = sub.add_parser("graph", help="Relationship graph")
	graph_sub = graph.add_subparsers(dest="action", required=True)
	graph_sub.add_parser("show", help="List nodes and their links")
	add = graph_sub.add_parser("add", help="Add a node")
	add.add_argument("name")
	add.add_argument("--color", default=None)
	add.add_argument("--id", dest="node_id", default=None)
	link = graph_sub.add_parser("link", help="Toggle the link between two nodes")
	link.add_argument("source")
	link.add_argument("target")
	rm = graph_sub.add_parser("rm", help="Delete a node and its links")
	rm.add_argument("node_id")
	rm.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")

	docs = sub.add_parser("docs", help="Versioned documents")
	docs_sub = docs.add_subparsers(dest="action", required=True)
	docs_sub.add_parser("list", help="List documents")
	show = docs_sub.add_parser("show", help="Print a document")
	show.add_argument("doc_id")
	show.add_argument("--version", type=int, default=None, help="Print this version instead of the newest")
	new = docs_sub.add_parser("new", help="Create a document")
	new.add_argument("title")
	new.add_argument("--content", default="")
	commit = docs_sub.add_parser("commit", help="Commit a new version")
	commit.add_argument("doc_id")
	source = commit.add_mutually_exclusive_group(required=True)
	source.add_argument("--content")
	source.add_argument("--file", type=Path)

	issues = sub.add_parser("issues", help="Kanban issues")
	issues_sub = issues.add_subparsers(dest="action", required=True)
	issues_sub.add_parser("board", help="Print the board")
	new_issue = issues_sub.add_parser("add", help="Create an issue")
	new_issue.add_argument("title")
	new_issue.add_argument("--description", default=None)
	new_issue.add_argument("--status", choices=STATUSES, default=STATUS_TODO)
	move = issues_sub.add_parser("move", help="Move an issue to another column")
	move.add_argument("issue_id")
	move.add_argument("status", choices=STATUSES)
	rm_issue = issues_sub.add_parser("rm", help="Delete an issue")
	rm_issue.add_argument("issue_id")

	return parser


def ask(question: str) -> bool:
	return input(f"{question} [y/N] ").strip().lower() in ("y", "yes")


# ============ Graph ============

def cmd_graph(client: CareerHubClient, args) -> int:
	editor = GraphEditor.from_payload(client.get_graph())

	if args.action == "show":
		for node_id, node in editor.nodes.items():
			color = f" ({node['color']})" if node.get("color") else ""
			print(f"{node_id}  {node.get('name', '')}{color}")
			for other in editor.neighbours(node_id):
				name = editor.nodes.get(other, {}).get("name", "?")
				print(f"    -- {other}  {name}")
		for source, target in editor.dangling_links():
			logger.warning(f"Link {source} -> {target} references a missing node")
		return 0

	if args.action == "add":
		node = editor.add_node(args.name, color=args.color, node_id=args.node_id)
		client.save_graph(editor.to_payload())
		print(node["id"])
		return 0

	if args.action == "link":
		for node_id in (args.source, args.target):
			if node_id not in editor.nodes:
				print(f"No such node: {node_id}", file=sys.stderr)
				return 1
		editor.shift_click(args.source)
		result = editor.shift_click(args.target)
		if result == "deselected":
			print("A node cannot be linked to itself")
			return 0
		client.save_graph(editor.to_payload())
		print(f"{result} {args.source} {args.target}")
		return 0

	if args.action == "rm":
		if args.node_id not in editor.nodes:
			print(f"No such node: {args.node_id}", file=sys.stderr)
			return 1
		confirm = (lambda name: True) if args.yes else (lambda name: ask(f'Delete node "{name}"?'))
		if not editor.delete_node(args.node_id, confirm):
			return 0
		client.save_graph(editor.to_payload())
		print(f"deleted {args.node_id}")
		return 0

	return 2


# ============ Documents ============

def cmd_docs(client: CareerHubClient, args) -> int:
	session = DocumentSession(client)

	if args.action == "list":
		for doc in session.refresh():
			print(f"{doc['docId']}  {doc['title']}")
		return 0

	if args.action == "show":
		doc = session.select(args.doc_id)
		if args.version is None:
			print(f"# {doc.get('title')} (version {doc.get('currentVersion')} of {len(doc.get('versions') or [])})")
			print(session.text)
		else:
			entry = session.version(args.version)
			print(f"# {entry['title']} (version {entry['index']}, {entry['version'].get('timestamp')})")
			print(entry["version"].get("content") or "")
		return 0

	if args.action == "new":
		doc = session.create(args.title, args.content)
		if doc is None:
			print("A title is required", file=sys.stderr)
			return 1
		print(doc["docId"])
		return 0

	if args.action == "commit":
		text = args.content if args.file is None else args.file.read_text(encoding="utf-8")
		session.select(args.doc_id)
		if session.text == text:
			logger.info("Content unchanged from the newest version, committing anyway")
		doc = session.commit(text)
		print(f"Document committed. Version count: {len(doc['versions'])}")
		return 0

	return 2


# ============ Issues ============

def print_board(board: KanbanBoard):
	columns = board.columns()
	counters = board.counters()
	for status in STATUSES:
		print(f"== {COLUMN_TITLES[status]} ({counters[status]})")
		for issue in columns[status]:
			print(f"  {issue.get('issueId')}  {issue.get('title')}")
			if issue.get("description"):
				for line in str(issue["description"]).splitlines():
					print(f"      {line}")


def cmd_issues(client: CareerHubClient, args) -> int:
	board = KanbanBoard(client)

	if args.action == "board":
		board.reload()
		print_board(board)
		return 0

	if args.action == "add":
		issue = board.create(args.title, args.description, args.status)
		if issue is None:
			print("A title is required", file=sys.stderr)
			return 1
		print(issue["issueId"])
		return 0

	if args.action == "move":
		board.drop(args.issue_id, args.status)
		print_board(board)
		return 0

	if args.action == "rm":
		result = board.delete(args.issue_id)
		for issue in result.get("removed", []):
			print(f"deleted {issue.get('issueId')}  {issue.get('title')}")
		return 0

	return 2


def cmd_status(client: CareerHubClient, args) -> int:
	stats = client.status()
	print(f"Data file: {stats.get('data_file')}")
	print(f"Graph:     {stats['nodes']} nodes, {stats['links']} links")
	print(f"Documents: {stats['documents']} ({stats['versions']} versions)")
	by_status = ", ".join(f"{k}: {v}" for k, v in stats["issues_by_status"].items())
	print(f"Issues:    {stats['issues']} ({by_status})")
	return 0


COMMANDS = {
	"status": cmd_status,
	"graph": cmd_graph,
	"docs": cmd_docs,
	"issues": cmd_issues,
}


def main(argv: Optional[List[str]] = None, client: Optional[CareerHubClient] = None) -> int:
	args = build_parser().parse_args(argv)
	setup_logging(level=logging.DEBUG if args.debug else logging.INFO)

	if args.command == "serve":
		from careerhub_server import ServerConfig, run_server
		config = ServerConfig(host=args.host, port=args.port, debug=args.debug, data_file=args.data)
		try:
			run_server(config)
		except KeyboardInterrupt:
			logger.info("Shutting down...")
		return 0

	if client is None:
		client = CareerHubClient(args.url)

	try:
		return COMMANDS[args.command](client, args)
	except ClientError as e:
		print(f"Error: {e}", file=sys.stderr)
		return 1
