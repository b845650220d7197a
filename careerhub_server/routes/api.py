import logging
from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import HTTPException

from careerhub import NotFoundError, VersionNotFound

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def get_store():
	"""Get the store this app serves."""
	return current_app.config["CAREERHUB_STORE"]


def json_body() -> dict:
	"""The request body as an object; anything else counts as empty."""
	data = request.get_json(silent=True)
	return data if isinstance(data, dict) else {}


@api_bp.errorhandler(NotFoundError)
def handle_not_found(e: NotFoundError):
	logger.warning(f"{request.method} {request.path}: {e}")
	return jsonify({"error": e.message}), 404


@api_bp.errorhandler(Exception)
def handle_unexpected(e: Exception):
	if isinstance(e, HTTPException):
		return e
	logger.exception(f"Unhandled error on {request.method} {request.path}")
	return jsonify({"error": str(e)}), 500


# ============ Status ============

@api_bp.route("/status", methods=["GET"])
def status():
	"""Counts of everything in the store."""
	store = get_store()
	stats = store.stats()
	stats["data_file"] = str(store.path)
	return jsonify(stats)


# ============ Graph ============

@api_bp.route("/graph", methods=["GET"])
def get_graph():
	return jsonify(get_store().get_graph())


@api_bp.route("/graph", methods=["POST"])
def save_graph():
	"""Replace the whole graph with the request body, stored as-is."""
	graph = request.get_json(silent=True)
	if graph is None:
		# An empty or unparseable body counts as an empty object
		graph = {}
	stored = get_store().replace_graph(graph)
	return jsonify({"success": True, "graphData": stored})


# ============ Documents ============

@api_bp.route("/documents", methods=["GET"])
def list_documents():
	return jsonify(get_store().list_documents())


@api_bp.route("/documents/<doc_id>", methods=["GET"])
def get_document(doc_id: str):
	return jsonify(get_store().get_document(doc_id))


@api_bp.route("/documents", methods=["POST"])
def create_document():
	data = json_body()
	doc = get_store().create_document(data.get("title"), data.get("content"))
	return jsonify(doc)


@api_bp.route("/documents/<doc_id>/commit", methods=["POST"])
def commit_document(doc_id: str):
	"""Append the posted content as the newest version."""
	data = json_body()
	return jsonify(get_store().commit_document(doc_id, data.get("content")))


@api_bp.route("/documents/<doc_id>/versions/<index>", methods=["GET"])
def get_document_version(doc_id: str, index: str):
	"""Read-only view of one stored version."""
	try:
		position = int(index)
	except ValueError:
		raise VersionNotFound(f"{doc_id}@{index}")
	return jsonify(get_store().get_document_version(doc_id, position))


# ============ Issues / Kanban ============

@api_bp.route("/issues", methods=["GET"])
def list_issues():
	return jsonify(get_store().list_issues())


@api_bp.route("/issues", methods=["POST"])
def create_issue():
	data = json_body()
	issue = get_store().create_issue(
		title=data.get("title"),
		description=data.get("description"),
		status=data.get("status"),
	)
	return jsonify(issue)


@api_bp.route("/issues/<issue_id>", methods=["PUT"])
def update_issue(issue_id: str):
	"""Merge whatever fields were sent into the issue."""
	return jsonify(get_store().update_issue(issue_id, json_body()))


@api_bp.route("/issues/<issue_id>", methods=["DELETE"])
def delete_issue(issue_id: str):
	removed = get_store().delete_issue(issue_id)
	return jsonify({"success": True, "removed": removed})
