"""Shared fixtures: a store in a temp dir, the Flask app over it, and clients."""

import logging
from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from careerhub import IdGenerator, Store
from careerhub.client import CareerHubClient
from careerhub_server import ServerConfig, create_app

BASE_URL = "http://careerhub.test"


class FakeClock:
	"""Frozen epoch seconds, advanced by hand."""

	def __init__(self, now: float = 1700000000.0):
		self.now = now

	def __call__(self) -> float:
		return self.now

	def tick(self, seconds: float = 0.001):
		self.now += seconds


class FlaskAdapter(BaseAdapter):
	"""Transport adapter that hands `requests` traffic to a Flask test client."""

	def __init__(self, test_client):
		super().__init__()
		self.test_client = test_client

	def send(self, request, **kwargs):
		parts = urlsplit(request.url)
		path = parts.path + (f"?{parts.query}" if parts.query else "")
		headers = {
			k: v for k, v in request.headers.items()
			if k.lower() not in ("content-length", "content-type")
		}
		flask_resp = self.test_client.open(
			path,
			method=request.method,
			data=request.body,
			headers=headers,
			content_type=request.headers.get("Content-Type"),
		)

		resp = requests.Response()
		resp.status_code = flask_resp.status_code
		resp.reason = flask_resp.status.split(" ", 1)[-1]
		resp.headers = CaseInsensitiveDict(flask_resp.headers)
		resp._content = flask_resp.get_data()
		resp.encoding = "utf-8"
		resp.url = request.url
		resp.request = request
		return resp

	def close(self):
		pass


class FailingAdapter(BaseAdapter):
	"""Every request fails as if the server were unreachable."""

	def send(self, request, **kwargs):
		raise requests.ConnectionError(f"Connection refused: {request.url}")

	def close(self):
		pass


@pytest.fixture(autouse=True)
def detach_log_handlers():
	"""Drop stdout handlers installed by `setup_logging` during a test."""
	yield
	root = logging.getLogger()
	for handler in list(root.handlers):
		if getattr(handler, "_careerhub", False):
			root.removeHandler(handler)


@pytest.fixture
def clock():
	return FakeClock()


@pytest.fixture
def data_file(tmp_path):
	return tmp_path / "careerData.json"


@pytest.fixture
def store(data_file, clock):
	return Store.load(data_file, ids=IdGenerator(clock))


@pytest.fixture
def app(data_file, store):
	application = create_app(ServerConfig(data_file=data_file), store=store)
	application.config["TESTING"] = True
	return application


@pytest.fixture
def client(app):
	"""Flask test client."""
	return app.test_client()


@pytest.fixture
def api(client):
	"""CareerHubClient whose requests are served by the Flask test client."""
	session = requests.Session()
	session.mount(BASE_URL, FlaskAdapter(client))
	return CareerHubClient(BASE_URL, session=session)


@pytest.fixture
def offline_api():
	session = requests.Session()
	session.mount(BASE_URL, FailingAdapter())
	return CareerHubClient(BASE_URL, session=session)
