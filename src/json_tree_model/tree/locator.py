"""Read-only traversals: lookup by id, ancestry tests and tree walks.

None of these functions raise for a missing node; they return ``None`` or
``False`` instead.
"""

from __future__ import annotations

from collections.abc import Iterator

from json_tree_model.tree.nodes import TreeNode


def iter_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    """Yield ``root`` and every node below it in depth-first pre-order."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def find_by_id(root: TreeNode | None, node_id: str) -> TreeNode | None:
    """Return the node with ``node_id`` in the tree under ``root``, or None."""
    for node in iter_nodes(root):
        if node.id == node_id:
            return node
    return None


def is_descendant(ancestor: TreeNode | None, candidate: TreeNode | None) -> bool:
    """True iff ``candidate`` is strictly below ``ancestor``.

    A node is not its own descendant.  Either argument being None gives False.
    """
    if ancestor is None or candidate is None:
        return False
    return any(
        node.id == candidate.id
        for child in ancestor.children
        for node in iter_nodes(child)
    )


def iter_ancestors(node: TreeNode) -> Iterator[TreeNode]:
    """Yield the parent of ``node``, then its parent, up to the root."""
    current = node.parent
    while current is not None:
        yield current
        current = current.parent
