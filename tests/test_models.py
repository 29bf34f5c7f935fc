"""Tests for models module."""

import pytest

from TreeLists.models import (
    Active,
    DuplicateChildError,
    DuplicateRootError,
    Idle,
    Node,
    PathTree,
    TreeError,
)


def _tree():
    tree = PathTree()
    a = tree.create_root("A", 3, "A")
    b = a.add_child("B", 2, "A|B")
    b.add_child("C", 1, "A|B|C")
    a.add_child("D", 1, "A|D")
    tree.create_root("E", 0, "E")
    return tree


class TestNode:
    def test_label(self):
        assert Node(name="Bútor", path="L|Bútor", count=37).label == "Bútor (37)"

    def test_add_and_get_child(self):
        parent = Node(name="A", path="A", count=1)
        child = parent.add_child("B", 2, "A|B")
        assert parent.get_child("B") is child
        assert parent.get_child("missing") is None

    def test_duplicate_child(self):
        parent = Node(name="A", path="A", count=1)
        parent.add_child("B", 2, "A|B")
        with pytest.raises(DuplicateChildError) as info:
            parent.add_child("B", 5, "A|B")
        assert info.value.parent_path == "A"
        assert parent.get_child("B").count == 2

    def test_identity_equality(self):
        assert Node("A", "A", 1) != Node("A", "A", 1)


class TestPathTree:
    def test_duplicate_root(self):
        tree = PathTree()
        tree.create_root("A", 1, "A")
        with pytest.raises(DuplicateRootError):
            tree.create_root("A", 1, "A")

    def test_errors_share_base(self):
        assert issubclass(DuplicateRootError, TreeError)
        assert issubclass(DuplicateChildError, TreeError)

    def test_walk_is_depth_first_in_insertion_order(self):
        paths = [chain[-1].path for chain in _tree().walk()]
        assert paths == ["A", "A|B", "A|B|C", "A|D", "E"]

    def test_walk_chains_start_at_root(self):
        for chain in _tree().walk():
            assert len(chain) == len(chain[-1].path.split("|"))
            assert chain[0].path == chain[-1].path.split("|")[0]

    def test_find(self):
        tree = _tree()
        assert tree.find("A|B|C").name == "C"
        assert tree.find("A|C") is None

    def test_chain_to(self):
        tree = _tree()
        node = tree.find("A|B|C")
        assert [n.path for n in tree.chain_to(node)] == ["A", "A|B", "A|B|C"]

    def test_chain_to_foreign_node(self):
        assert _tree().chain_to(Node("C", "A|B|C", 1)) is None

    def test_len_and_iter(self):
        tree = _tree()
        assert len(tree) == 5
        assert [root.name for root in tree] == ["A", "E"]


class TestSelectionState:
    def test_idle_equality(self):
        assert Idle() == Idle()

    def test_active_compares_node_identity(self):
        node = Node("A", "A", 1)
        assert Active(node) == Active(node)
        assert Active(node) != Active(Node("A", "A", 1))
