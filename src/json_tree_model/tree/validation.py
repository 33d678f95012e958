"""check_tree: report violations of the TreeNode data-model invariants.

Checked invariants:
- ids are pairwise distinct
- only the root is parentless, and every child points back at its parent
- a child appears in its parent's children exactly once
- ARRAY children are keyed "0".."n-1" in order
- OBJECT children have pairwise distinct keys
- leaves own no children; containers carry no scalar value

Cycles cannot be reported by walking ``children`` (the walk would not end),
so the walk tracks visited nodes and reports a revisit instead.
"""

from __future__ import annotations

from collections import Counter

from json_tree_model.tree.nodes import NodeType, TreeNode


def check_tree(root: TreeNode) -> list[str]:
    """Return one message per invariant violation; empty means the tree is valid."""
    problems: list[str] = []
    if root.parent is not None:
        problems.append(f"root {root.id} has a parent ({root.parent.id})")

    seen_ids: set[str] = set()
    visited: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in visited:
            problems.append(f"node {node.id} is reachable more than once")
            continue
        visited.add(id(node))

        if node.id in seen_ids:
            problems.append(f"duplicate id {node.id}")
        seen_ids.add(node.id)

        problems.extend(_check_node(node))
        stack.extend(reversed(node.children))

    return problems


def _check_node(node: TreeNode) -> list[str]:
    problems: list[str] = []

    if node.is_leaf and node.children:
        problems.append(f"leaf {node.id} ({node.type}) has children")
    if node.is_container and node.value is not None:
        problems.append(f"container {node.id} ({node.type}) has a value")

    occurrences = Counter(id(child) for child in node.children)
    for child in node.children:
        if child.parent is not node:
            problems.append(f"child {child.id} of {node.id} does not point back to it")
        if occurrences[id(child)] > 1:
            problems.append(f"child {child.id} appears more than once under {node.id}")

    if node.type == NodeType.ARRAY:
        for idx, child in enumerate(node.children):
            if child.key != str(idx):
                problems.append(
                    f"array {node.id} child {child.id} has key {child.key!r}, "
                    f"expected {str(idx)!r}"
                )
    elif node.type == NodeType.OBJECT:
        key_counts = Counter(child.key for child in node.children)
        for key, count in key_counts.items():
            if count > 1:
                problems.append(f"object {node.id} has key {key!r} {count} times")

    return problems
