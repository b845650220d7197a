import pytest

from careerhub.kanban import KanbanBoard, group_by_status


@pytest.fixture
def board(api):
	return KanbanBoard(api)


def test_group_by_status_puts_unknown_in_done():
	issues = [
		{"issueId": "1", "status": "todo"},
		{"issueId": "2", "status": "in-progress"},
		{"issueId": "3", "status": "blocked"},
		{"issueId": "4"},
	]
	columns = group_by_status(issues)
	assert [i["issueId"] for i in columns["todo"]] == ["1"]
	assert [i["issueId"] for i in columns["in-progress"]] == ["2"]
	assert [i["issueId"] for i in columns["done"]] == ["3", "4"]


def test_create_reloads(board):
	issue = board.create("Write tests", "all of them", "in-progress")
	assert board.issues == [issue]
	assert board.counters() == {"todo": 0, "in-progress": 1, "done": 0}


def test_create_without_title_is_ignored(board):
	assert board.create("") is None
	assert board.issues == []


def test_drop_moves_card(board):
	issue = board.create("Ship it")
	board.drop(issue["issueId"], "done")
	columns = board.columns()
	assert columns["todo"] == []
	assert [i["title"] for i in columns["done"]] == ["Ship it"]


def test_delete_reloads(board):
	keep = board.create("Keep")
	drop = board.create("Drop")
	result = board.delete(drop["issueId"])
	assert result["removed"] == [drop]
	assert board.issues == [keep]
