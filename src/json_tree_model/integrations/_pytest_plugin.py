"""pytest plugin for json-tree-model.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_model.tree import TreeNode, check_tree


@pytest.fixture(scope="session")
def assert_valid_tree() -> Any:
    """Fixture that returns a callable tree-invariant asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to check_tree(), which only reads the tree it is given).

    Usage in tests::

        def test_move_keeps_tree_valid(assert_valid_tree):
            root = parse('{"arr": [1, 2, 3]}')
            move(root, root.children[0].children[0].id, root.children[0].children[2].id)
            assert_valid_tree(root)

    Returns:
        A callable ``_assert(root) -> None`` that raises ``AssertionError``
        listing every violated invariant.
    """

    def _assert(root: TreeNode) -> None:
        """Assert that ``root`` satisfies every tree invariant.

        Raises:
            AssertionError: When check_tree() reports problems, with one line
                per problem.
        """
        problems = check_tree(root)
        if problems:
            details = "\n".join(f"  - {problem}" for problem in problems)
            raise AssertionError(
                f"tree invariants violated ({len(problems)}):\n"
                f"{details}"
            )

    return _assert
