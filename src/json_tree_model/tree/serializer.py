"""Serialization of a TreeNode tree back to plain values and JSON text.

The inverse of TreeBuilder's structural mapping.  Ids, parent links and the
``collapsed`` flag are presentation/bookkeeping state and never reach the
output.
"""

from __future__ import annotations

import json
from typing import Any

from json_tree_model.tree.nodes import NodeType, TreeNode


def to_plain(node: TreeNode) -> Any:
    """Convert a tree into plain Python values.

    OBJECT nodes become dicts keyed by each child's key (children order is
    insertion order), ARRAY nodes become lists, leaves return ``value``.
    """
    if node.type == NodeType.OBJECT:
        return {child.key: to_plain(child) for child in node.children}
    if node.type == NodeType.ARRAY:
        return [to_plain(child) for child in node.children]
    return node.value


def to_text(node: TreeNode, indent: int | None = 2, ensure_ascii: bool = False) -> str:
    """Serialize a tree to indented JSON text.

    Args:
        node:         Root of the (sub)tree to serialize.
        indent:       Spaces per nesting level.  None gives compact output.
        ensure_ascii: Escape non-ASCII characters when True.
    """
    return json.dumps(to_plain(node), indent=indent, ensure_ascii=ensure_ascii)
