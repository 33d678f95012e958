"""Public API functions for json-tree-model.

This module provides the stateless user-facing functions: parse, to_plain,
to_text, find_by_id and move.  Each call works only on the tree it is
handed; nothing is cached between calls.  For a long-lived document with
collapse state use ``TreeEditor``.
"""

from __future__ import annotations

from typing import Any

from json_tree_model.config import CONFIG_INDENT, ConfigIndent, TreeConfig
from json_tree_model.tree import builder, locator, mutator, serializer
from json_tree_model.tree.nodes import TreeNode

__all__ = ["find_by_id", "move", "parse", "to_plain", "to_text"]


def parse(text: str, config: TreeConfig | None = None) -> TreeNode:
    """Parse JSON text into a new identified tree.

    Args:
        text:   JSON text.  Surrounding whitespace is ignored.
        config: Root key and id seed.  Defaults to ``TreeConfig()`` when None.

    Returns:
        The root node, keyed ``config.root_key``.

    Raises:
        InputError: If text is not a str or is blank.
        json.JSONDecodeError: If text is not well-formed JSON.
    """
    return builder.parse(text, config=config)


def to_plain(node: TreeNode) -> Any:
    """Return the plain Python value (dict/list/scalar) a tree represents."""
    return serializer.to_plain(node)


def to_text(
    node: TreeNode,
    indent: int | None | ConfigIndent = CONFIG_INDENT,
    config: TreeConfig | None = None,
) -> str:
    """Serialize a tree to JSON text.

    Args:
        node:   Root of the (sub)tree to serialize.
        indent: Spaces per level.  When omitted, ``config.indent`` (2 unless
                configured) is used.  None gives compact output.
        config: Supplies ``indent`` and ``ensure_ascii``.  Defaults to
                ``TreeConfig()``.
    """
    cfg = config if config is not None else TreeConfig()
    return serializer.to_text(
        node, indent=cfg.resolve_indent(indent), ensure_ascii=cfg.ensure_ascii
    )


def find_by_id(root: TreeNode, node_id: str) -> TreeNode | None:
    """Return the node with ``node_id`` under ``root``, or None."""
    return locator.find_by_id(root, node_id)


def move(
    root: TreeNode,
    source_id: str,
    target_id: str,
    config: TreeConfig | None = None,
) -> bool:
    """Move node ``source_id`` onto node ``target_id`` within ``root``.

    Returns:
        True when the tree changed.  False for a missing id, the root as
        source, a self-move, a move into the source's own subtree, or a
        parentless leaf target; the tree is then left untouched.
    """
    return mutator.move(root, source_id, target_id, config=config)
