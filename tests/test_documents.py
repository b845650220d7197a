import pytest

from careerhub.documents import DocumentSession, NoDocumentSelected, latest_content


@pytest.fixture
def session(api):
	return DocumentSession(api)


def test_starts_with_nothing_loaded(session):
	assert not session.loaded
	assert session.text == ""
	with pytest.raises(NoDocumentSelected):
		session.commit("text")


def test_create_loads_new_document(session):
	doc = session.create("Journal")
	assert session.loaded
	assert session.current["docId"] == doc["docId"]
	assert session.text == ""
	assert session.documents == [{"docId": doc["docId"], "title": "Journal"}]


def test_blank_title_does_nothing(session):
	assert session.create("") is None
	assert not session.loaded


def test_select_shows_newest_version(session, api):
	doc = api.create_document("Journal", "day one")
	api.commit_document(doc["docId"], "day two")
	session.select(doc["docId"])
	assert session.text == "day two"


def test_select_none_clears(session, api):
	doc = api.create_document("Journal", "day one")
	session.select(doc["docId"])
	session.select(None)
	assert not session.loaded
	assert session.text == ""


def test_commit_refreshes_from_response(session):
	session.create("Journal")
	updated = session.commit("first entry")
	assert session.current == updated
	assert updated["currentVersion"] == 1
	assert latest_content(updated) == "first entry"


def test_version_view(session):
	session.create("Journal", "draft")
	session.commit("final")
	assert session.version(0)["version"]["content"] == "draft"


def test_latest_content_tolerates_bad_index():
	assert latest_content({"versions": [], "currentVersion": 3}) == ""
	assert latest_content({"versions": [{"content": "x"}]}) == "x"
