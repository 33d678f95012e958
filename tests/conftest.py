"""Shared fixtures for the json-tree-model test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from json_tree_model.tree import TreeBuilder, TreeNode

PathLookup = Callable[..., TreeNode]


@pytest.fixture
def builder() -> TreeBuilder:
    """A fresh TreeBuilder instance for each test."""
    return TreeBuilder()


@pytest.fixture
def at_path() -> PathLookup:
    """Return a helper following child keys from a root node.

    Integers are matched as array indices: ``at_path(root, "arr", 0)``.
    """

    def _lookup(root: TreeNode, *path: str | int) -> TreeNode:
        node = root
        for part in path:
            matches = [c for c in node.children if c.key == str(part)]
            assert matches, f"no child {part!r} under node {node.id}"
            node = matches[0]
        return node

    return _lookup
