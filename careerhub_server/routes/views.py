import logging
from flask import Blueprint, Response

from ..page import get_app_html

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


@views_bp.route("/")
def home():
	"""The single-page UI: graph, document editor and kanban board."""
	return Response(get_app_html(), mimetype="text/html")
