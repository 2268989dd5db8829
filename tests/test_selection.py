import pytest

from drawkit.selection import Node, SelectableList, SelectionBrain
from drawkit.settings import DARK_GREEN, NodeSettings


def make_list(count):
    return SelectableList(Node() for _ in range(count))


def test_node_defaults_from_settings():
    node = Node()
    assert node.is_selected is False
    assert node.highlight_color == DARK_GREEN
    assert node.settings == NodeSettings()


def test_toggle_selects_and_deselects():
    nodes = make_list(3)
    brain = SelectionBrain(nodes)
    brain.toggle_select(1, 0)
    assert nodes.selected == 1
    assert nodes[1].is_selected is True
    brain.toggle_select(1, 0)
    assert nodes.selected is None
    assert nodes[1].is_selected is False


def test_selecting_another_node_moves_selection():
    nodes = make_list(3)
    brain = SelectionBrain(nodes)
    brain.toggle_select(0, 0)
    brain.toggle_select(2, 0)
    assert nodes.selected == 2
    assert [node.is_selected for node in nodes] == [False, False, True]


def test_selection_is_single_across_lists():
    first, second = make_list(2), make_list(2)
    brain = SelectionBrain([first, second])
    brain.toggle_select(1, 0)
    brain.toggle_select(0, 1)
    assert first.selected is None
    assert first[1].is_selected is False
    assert second.selected == 0
    assert second[0].is_selected is True


def test_node_signal_reaches_brain():
    nodes = make_list(2)
    SelectionBrain(nodes)
    nodes[1].toggle_select()
    assert nodes.selected == 1
    nodes[1].toggle_select()
    assert nodes.selected is None


def test_appended_node_is_connected():
    nodes = make_list(1)
    SelectionBrain(nodes)
    added = Node()
    nodes.append(added)
    added.toggle_select()
    assert nodes.selected == 1
    assert added.is_selected is True


def test_resize_reconnects_and_drops_removed_nodes():
    nodes = make_list(3)
    SelectionBrain(nodes)
    removed = nodes[2]
    nodes.resize(2)
    assert len(nodes) == 2
    removed.toggle_select()
    assert nodes.selected is None
    nodes.resize(4)
    nodes[3].toggle_select()
    assert nodes.selected == 3


def test_resize_clears_dropped_selection():
    nodes = make_list(3)
    brain = SelectionBrain(nodes)
    brain.toggle_select(2, 0)
    nodes.resize(1)
    assert nodes.selected is None


def test_resize_rejects_negative():
    nodes = make_list(1)
    with pytest.raises(ValueError):
        nodes.resize(-1)


def test_get_node_returns_list_item():
    nodes = make_list(2)
    brain = SelectionBrain(nodes)
    assert brain.get_node(0, 1) is nodes[1]
    with pytest.raises(IndexError):
        brain.get_node(1, 0)


def test_toggle_with_bad_list_index_raises():
    nodes = make_list(2)
    brain = SelectionBrain(nodes)
    with pytest.raises(IndexError):
        brain.toggle_select(0, 5)


def test_each_toggle_connected_once():
    nodes = make_list(2)
    SelectionBrain(nodes)
    nodes.append(Node())
    nodes[0].toggle_select()
    # A doubled connection would toggle twice and leave nothing selected.
    assert nodes.selected == 0