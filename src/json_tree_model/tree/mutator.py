"""Structural edits: detach, key de-duplication, array re-indexing and move.

``move`` is the composite operation the editing surface calls in response to
a drag gesture.  It validates the whole request before touching the tree, so
a rejected move leaves the tree exactly as it was.

Invariants on exit of a successful move:
- every array whose child list changed has keys "0".."n-1" in order
- object children keep pairwise distinct keys
- ``source`` keeps its id and its whole subtree
"""

from __future__ import annotations

import logging

from json_tree_model.config import TreeConfig
from json_tree_model.tree.locator import find_by_id, iter_ancestors
from json_tree_model.tree.nodes import NodeType, TreeNode

logger = logging.getLogger(__name__)


def detach(node: TreeNode) -> None:
    """Remove ``node`` from its parent's children, matching by id.

    ``node.parent`` is left as is; the caller reassigns it.  No-op for a
    rootless node.
    """
    parent = node.parent
    if parent is None:
        return
    for idx, child in enumerate(parent.children):
        if child.id == node.id:
            del parent.children[idx]
            return


def unique_key(
    target_parent: TreeNode,
    desired_key: str | None,
    default: str = "newKey",
    separator: str = "_",
) -> str:
    """Return a key not used by any child of ``target_parent``.

    ``desired_key`` is returned unchanged when free (``default`` stands in
    for an empty key).  Otherwise "{key}{separator}{n}" is tried for
    n = 1, 2, ... and the first free one is returned.
    """
    key = desired_key or default
    used = {child.key for child in target_parent.children}
    if key not in used:
        return key

    n = 1
    while f"{key}{separator}{n}" in used:
        n += 1
    return f"{key}{separator}{n}"


def renormalize_array_keys(node: TreeNode | None) -> None:
    """Rewrite each child key of an ARRAY node to its position.  Idempotent."""
    if node is None or node.type != NodeType.ARRAY:
        return
    for idx, child in enumerate(node.children):
        child.key = str(idx)


def _rejection(root: TreeNode, source: TreeNode, target: TreeNode) -> str | None:
    if source.id == root.id:
        return "source is the root"
    if source.id == target.id:
        return "source and target are the same node"
    if any(ancestor.id == source.id for ancestor in iter_ancestors(target)):
        return "target lies inside the source subtree"
    if target.is_leaf and target.parent is None:
        return "target is a leaf without a parent"
    return None


def move(
    root: TreeNode,
    source_id: str,
    target_id: str,
    config: TreeConfig | None = None,
) -> bool:
    """Relocate the subtree ``source_id`` onto ``target_id``.

    Dropping onto a container (object/array) appends the source as its last
    child.  Dropping onto a leaf inserts the source as the sibling right
    after the leaf.  Object destinations resolve key collisions with
    ``unique_key``; array destinations re-index.

    Args:
        root:      Root of the tree both nodes must belong to.
        source_id: Id of the node to move.
        target_id: Id of the drop target.
        config:    Supplies placeholder keys and the collision separator.

    Returns:
        True if the tree was changed, False if the request was rejected.
    """
    cfg = config if config is not None else TreeConfig()

    source = find_by_id(root, source_id)
    target = find_by_id(root, target_id)
    if source is None:
        reason: str | None = "source not found"
    elif target is None:
        reason = "target not found"
    else:
        reason = _rejection(root, source, target)
    if source is None or target is None or reason is not None:
        logger.debug("move %s -> %s rejected: %s", source_id, target_id, reason)
        return False

    destination = target if target.is_container else target.parent
    if destination is None:
        return False

    source_old_parent = source.parent
    detach(source)

    if target.is_container:
        if target.type == NodeType.OBJECT:
            source.key = unique_key(
                target,
                source.key or cfg.moved_key,
                default=cfg.default_key,
                separator=cfg.key_separator,
            )
        target.children.append(source)
    else:
        if destination.type == NodeType.OBJECT:
            source.key = unique_key(
                destination,
                source.key or target.key or cfg.moved_key,
                default=cfg.default_key,
                separator=cfg.key_separator,
            )
        destination.children.insert(target.index_in_parent() + 1, source)
    source.parent = destination

    renormalize_array_keys(source_old_parent)
    renormalize_array_keys(target.parent)
    renormalize_array_keys(target)

    logger.debug(
        "moved %s under %s as key %r", source.id, destination.id, source.key
    )
    return True
