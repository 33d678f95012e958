"""Collapse state and display helpers for the rendering layer.

Everything here reads or writes the ``collapsed`` flag only; structure, keys
and ids are never touched.  The renderer decides what to draw from these
answers.
"""

from __future__ import annotations

import json

from json_tree_model.tree.nodes import NodeType, TreeNode

# Integral floats at or beyond this magnitude keep exponent notation.
_EXPONENT_THRESHOLD = 1e21


def set_default_collapsed(node: TreeNode | None, is_root: bool = True) -> None:
    """Collapse every non-empty container except the root itself."""
    if node is None or not node.children:
        return
    node.collapsed = not is_root
    for child in node.children:
        set_default_collapsed(child, is_root=False)


def set_collapsed_recursively(
    node: TreeNode | None, collapsed: bool, include_self: bool = True
) -> None:
    """Set ``collapsed`` on every non-empty container in the subtree.

    With ``include_self=False`` the flag of ``node`` itself is left alone.
    """
    if node is None:
        return
    if include_self and node.children:
        node.collapsed = collapsed
    for child in node.children:
        set_collapsed_recursively(child, collapsed, include_self=True)


def toggle_collapsed(node: TreeNode) -> bool:
    """Flip the collapsed flag of a non-empty container and return it.

    Collapsing a node also collapses everything below it, so re-expanding
    shows one level at a time.  Leaves and empty containers are unchanged.
    """
    if not node.children:
        return node.collapsed
    node.collapsed = not node.collapsed
    if node.collapsed:
        set_collapsed_recursively(node, True, include_self=False)
    return node.collapsed


def collapse_all(root: TreeNode) -> None:
    set_collapsed_recursively(root, True, include_self=False)


def expand_all(root: TreeNode) -> None:
    set_collapsed_recursively(root, False, include_self=False)


def contains_array(node: TreeNode | None) -> bool:
    """True for an array, or an object leading to an array through objects."""
    if node is None:
        return False
    if node.type == NodeType.ARRAY:
        return True
    if node.type != NodeType.OBJECT:
        return False
    return any(contains_array(child) for child in node.children)


def visible_children(node: TreeNode, array_path_only: bool = False) -> list[TreeNode]:
    """Children to draw, optionally keeping only the paths that reach arrays."""
    if not array_path_only:
        return list(node.children)
    return [child for child in node.children if contains_array(child)]


def format_leaf(node: TreeNode) -> str:
    """Render a leaf value for display ("text" quoted, true, 1.5, null).

    Integral floats below 1e21 drop the fraction (1.0 -> "1", -0.0 -> "0");
    larger ones keep exponent form ("1e+21").
    """
    if node.type == NodeType.STRING:
        return f'"{node.value}"'
    value = node.value
    if (
        node.type == NodeType.NUMBER
        and isinstance(value, float)
        and value.is_integer()
        and abs(value) < _EXPONENT_THRESHOLD
    ):
        return str(int(value))
    return json.dumps(value)


def describe(node: TreeNode) -> str:
    """Short type label: "Object (n)", "Array (n)" or the leaf type name."""
    if node.type == NodeType.OBJECT:
        return f"Object ({len(node.children)})"
    if node.type == NodeType.ARRAY:
        return f"Array ({len(node.children)})"
    return str(node.type)


def display_key(node: TreeNode, is_root: bool = False) -> str:
    if is_root:
        return "root"
    return "(unnamed)" if node.key is None else str(node.key)
