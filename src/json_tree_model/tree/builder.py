"""TreeBuilder: converts any valid JSON value into an identified TreeNode tree.

Uses recursive dispatch on the classified NodeType.  Every node receives a
fresh id drawn from an explicit IdSequence, so the builder itself holds no
hidden counter state and can be exercised in isolation.

``parse`` is the text entry point: it validates the raw input, decodes it
with the standard ``json`` module and builds the tree under the root key.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from json_tree_model.config import TreeConfig
from json_tree_model.errors import InputError
from json_tree_model.tree.ids import IdSequence
from json_tree_model.tree.nodes import NodeType, TreeNode, classify

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class TreeBuilder:
    """Converts a decoded JSON value into a TreeNode tree.

    Object entries are visited in insertion order, array elements in index
    order.  Children are appended to their parent as they are built, so ids
    are allocated in depth-first pre-order: a parent always has a smaller id
    than any of its descendants.

    Example::
        builder = TreeBuilder()
        tree = builder.build({"tags": ["a", "b"]}, key="root")
        # tree: OBJECT(id="2") -> ARRAY(key="tags") -> STRING("0"), STRING("1")
    """

    def build(
        self,
        value: JsonValue,
        key: str | None = None,
        parent: TreeNode | None = None,
        ids: Iterator[str] | None = None,
    ) -> TreeNode:
        """Convert a JSON value to a TreeNode tree.

        Args:
            value:  Any valid JSON value (dict, list, str, int, float, bool, None).
            key:    Key of the new node within ``parent``.
            parent: Owning node, or None for a root.  The new node is NOT
                    appended to ``parent.children``; the caller does that.
            ids:    Id source.  A fresh IdSequence is used when omitted.

        Returns:
            The new node, with its whole subtree built.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
        """
        if ids is None:
            ids = IdSequence()

        node_type = classify(value)
        node = TreeNode(id=next(ids), key=key, type=node_type)
        node.parent = parent

        if node_type == NodeType.OBJECT:
            self._build_object(node, value, ids)
        elif node_type == NodeType.ARRAY:
            self._build_array(node, value, ids)
        else:
            node.value = value

        return node

    def _build_object(
        self, node: TreeNode, obj: Mapping[str, Any], ids: Iterator[str]
    ) -> None:
        for name, val in obj.items():
            node.children.append(self.build(val, key=name, parent=node, ids=ids))

    def _build_array(
        self, node: TreeNode, arr: Sequence[Any], ids: Iterator[str]
    ) -> None:
        for idx, item in enumerate(arr):
            node.children.append(self.build(item, key=str(idx), parent=node, ids=ids))


def parse(text: Any, config: TreeConfig | None = None) -> TreeNode:
    """Parse JSON text into a new tree.

    Args:
        text:   The raw JSON text.  Surrounding whitespace is ignored.
        config: Supplies the root key and the id seed.  Defaults to
                ``TreeConfig()`` when None.

    Returns:
        The root node.  Its key is ``config.root_key`` and its parent is None.

    Raises:
        InputError: If text is not a str, or is empty after trimming.
        json.JSONDecodeError: If text is not well-formed JSON.
    """
    cfg = config if config is not None else TreeConfig()

    if not isinstance(text, str):
        raise InputError(f"input must be a string, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        raise InputError("input must not be empty")

    decoded = json.loads(stripped)
    return TreeBuilder().build(
        decoded, key=cfg.root_key, parent=None, ids=IdSequence(start=cfg.id_start)
    )
