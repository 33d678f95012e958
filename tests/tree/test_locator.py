"""Tests for find_by_id(), is_descendant(), iter_ancestors() and iter_nodes()."""

from __future__ import annotations

import pytest

from json_tree_model.tree.builder import parse
from json_tree_model.tree.locator import (
    find_by_id,
    is_descendant,
    iter_ancestors,
    iter_nodes,
)
from json_tree_model.tree.nodes import TreeNode

DOC = '{"a": 1, "b": {"x": 2, "y": [3, 4]}, "arr": [10, 20]}'


@pytest.fixture
def root() -> TreeNode:
    return parse(DOC)


class TestIterNodes:
    def test_pre_order(self, root: TreeNode) -> None:
        keys = [node.key for node in iter_nodes(root)]
        assert keys == ["root", "a", "b", "x", "y", "0", "1", "arr", "0", "1"]

    def test_none_root(self) -> None:
        assert list(iter_nodes(None)) == []


class TestFindById:
    def test_finds_every_node(self, root: TreeNode) -> None:
        for node in iter_nodes(root):
            assert find_by_id(root, node.id) is node

    def test_missing_id(self, root: TreeNode) -> None:
        assert find_by_id(root, "999") is None

    def test_none_root(self) -> None:
        assert find_by_id(None, "2") is None

    def test_search_limited_to_subtree(self, root: TreeNode, at_path) -> None:
        b = at_path(root, "b")
        assert find_by_id(b, at_path(root, "arr").id) is None
        assert find_by_id(b, at_path(root, "b", "y", 1).id) is not None


class TestIsDescendant:
    def test_direct_child(self, root: TreeNode, at_path) -> None:
        assert is_descendant(root, at_path(root, "a"))

    def test_transitive(self, root: TreeNode, at_path) -> None:
        assert is_descendant(at_path(root, "b"), at_path(root, "b", "y", 0))

    def test_not_reflexive(self, root: TreeNode) -> None:
        assert not is_descendant(root, root)

    def test_sibling_and_ancestor(self, root: TreeNode, at_path) -> None:
        assert not is_descendant(at_path(root, "b"), at_path(root, "arr"))
        assert not is_descendant(at_path(root, "b", "y"), at_path(root, "b"))

    def test_none_arguments(self, root: TreeNode) -> None:
        assert is_descendant(None, root) is False
        assert is_descendant(root, None) is False


class TestIterAncestors:
    def test_walks_to_root(self, root: TreeNode, at_path) -> None:
        leaf = at_path(root, "b", "y", 1)
        assert [n.key for n in iter_ancestors(leaf)] == ["y", "b", "root"]

    def test_root_has_none(self, root: TreeNode) -> None:
        assert list(iter_ancestors(root)) == []
