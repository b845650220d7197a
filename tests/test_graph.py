import pytest

from careerhub.graph import GraphEditor, RADIUS
from careerhub.ids import IdGenerator


@pytest.fixture
def editor():
	return GraphEditor.from_payload({
		"nodes": [
			{"id": "a", "name": "Alpha"},
			{"id": "b", "name": "Beta", "color": "#ff0000"},
			{"id": "c", "name": "Gamma"},
		],
		"links": [{"source": "a", "target": "b"}],
	})


class TestLinkEditing:

	def test_first_shift_click_selects(self, editor):
		assert editor.shift_click("a") == "selected"
		assert editor.selected == "a"

	def test_same_node_deselects(self, editor):
		editor.shift_click("c")
		assert editor.shift_click("c") == "deselected"
		assert editor.selected is None
		assert editor.links == [("a", "b")]

	def test_different_node_adds_link(self, editor):
		editor.shift_click("a")
		assert editor.shift_click("c") == "linked"
		assert ("a", "c") in editor.links
		assert editor.selected is None

	def test_existing_link_is_removed_in_either_direction(self, editor):
		editor.shift_click("b")
		assert editor.shift_click("a") == "unlinked"
		assert editor.links == []

	def test_unknown_node(self, editor):
		with pytest.raises(KeyError):
			editor.shift_click("zzz")


class TestDeleteNode:

	def test_declined_confirmation_keeps_node(self, editor):
		asked = []
		assert editor.delete_node("a", lambda name: asked.append(name) or False) is False
		assert asked == ["Alpha"]
		assert "a" in editor.nodes

	def test_removes_node_and_touching_links(self, editor):
		editor.toggle_link("b", "c")
		assert editor.delete_node("b", lambda name: True) is True
		assert "b" not in editor.nodes
		assert editor.links == []

	def test_clears_pending_selection(self, editor):
		editor.shift_click("c")
		editor.delete_node("c", lambda name: True)
		assert editor.selected is None


class TestDrag:

	def test_position_is_clamped_to_viewport(self, editor):
		assert editor.drag("a", -50, 900, width=400, height=300) == (RADIUS, 300 - RADIUS)
		node = editor.nodes["a"]
		assert (node["fx"], node["fy"]) == (RADIUS, 300 - RADIUS)

	def test_release_unpins(self, editor):
		editor.drag("a", 100, 100, width=400, height=300)
		editor.release("a")
		assert "fx" not in editor.nodes["a"]
		assert editor.nodes["a"]["x"] == 100


class TestSerialization:

	def test_object_endpoints_become_ids(self):
		editor = GraphEditor.from_payload({
			"nodes": [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}],
			"links": [{"source": {"id": "a", "name": "A"}, "target": "b"}],
		})
		assert editor.links == [("a", "b")]

	def test_payload_is_plain(self, editor):
		editor.drag("a", 50, 60, width=400, height=300)
		payload = editor.to_payload()
		assert payload["links"] == [{"source": "a", "target": "b"}]
		assert payload["nodes"][0] == {"id": "a", "name": "Alpha", "x": 50, "y": 60}
		assert payload["nodes"][1]["color"] == "#ff0000"

	def test_add_node_omits_unset_fields(self, editor):
		node = editor.add_node("Delta", node_id="d")
		assert node == {"id": "d", "name": "Delta"}
		assert editor.to_payload()["nodes"][-1] == node

	def test_generated_node_ids_are_unique(self, editor):
		first = editor.add_node("One")
		second = editor.add_node("Two")
		assert first["id"] != second["id"]
		assert first["id"].startswith("n_")

	def test_node_ids_share_the_id_scheme(self, clock):
		editor = GraphEditor(IdGenerator(clock))
		first = editor.add_node("One")
		second = editor.add_node("Two")
		assert first["id"] == "n_1700000000000"
		assert second["id"] == "n_1700000000001"

	def test_generated_id_skips_loaded_nodes(self, clock):
		editor = GraphEditor.from_payload(
			{"nodes": [{"id": "n_1700000000005", "name": "Old"}], "links": []},
			ids=IdGenerator(clock),
		)
		node = editor.add_node("New")
		assert node["id"] == "n_1700000000006"

	def test_dangling_links_are_reported(self):
		editor = GraphEditor.from_payload({"nodes": [{"id": "a", "name": "A"}], "links": [{"source": "a", "target": "gone"}]})
		assert editor.dangling_links() == [("a", "gone")]
		assert editor.neighbours("a") == ["gone"]
