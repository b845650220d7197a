from datetime import datetime, timezone

from careerhub import IdGenerator
from careerhub.models import Issue, iso_timestamp


def test_id_uses_clock_millis(clock):
	ids = IdGenerator(clock)
	assert ids.next("issue") == f"issue_{int(clock.now * 1000)}"


def test_same_millisecond_is_bumped(clock):
	ids = IdGenerator(clock)
	first = ids.next("doc")
	second = ids.next("doc")
	assert first != second
	assert int(second.split("_")[1]) == int(first.split("_")[1]) + 1


def test_clock_going_backwards_stays_monotonic(clock):
	ids = IdGenerator(clock)
	first = int(ids.next("doc").split("_")[1])
	clock.tick(-5)
	second = int(ids.next("doc").split("_")[1])
	assert second > first


def test_observe_ignores_foreign_ids(clock):
	ids = IdGenerator(clock)
	ids.observe(["custom-id", None, 42, "doc_abc"])
	assert ids.last == 0


def test_iso_timestamp_matches_browser_format():
	moment = datetime(2024, 3, 5, 7, 8, 9, 123456, tzinfo=timezone.utc)
	assert iso_timestamp(moment) == "2024-03-05T07:08:09.123Z"


def test_issue_create_defaults():
	assert Issue.create("issue_1").to_dict() == {
		"issueId": "issue_1",
		"title": "Untitled",
		"description": "",
		"status": "todo",
	}
