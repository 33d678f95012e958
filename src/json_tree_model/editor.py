"""TreeEditor: orchestrator holding one editable JSON document.

This is the wiring layer the rendering collaborator talks to.  It owns the
current root, applies the default collapse state after each successful load,
and routes drag-and-drop gestures to ``move`` and clicks to the collapse
toggles.

Architecture:
- load() replaces the document on success and clears it on failure, so a
  bad input never leaves a stale tree behind to be rendered.
- Structural requests (find, move, toggle) on an empty editor report
  None/False like the underlying locator and mutator.  Requests that must
  produce output (root, text, plain, collapse_all, expand_all) raise
  EmptyDocumentError instead.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from json_tree_model.config import CONFIG_INDENT, ConfigIndent, TreeConfig
from json_tree_model.errors import EmptyDocumentError, InputError
from json_tree_model.tree import presentation
from json_tree_model.tree.builder import parse
from json_tree_model.tree.locator import find_by_id, iter_nodes
from json_tree_model.tree.mutator import move
from json_tree_model.tree.nodes import TreeNode
from json_tree_model.tree.serializer import to_plain, to_text

logger = logging.getLogger(__name__)

__all__ = ["TreeEditor"]


class TreeEditor:
    """A single JSON document under interactive editing.

    Example::

        from json_tree_model import TreeEditor

        editor = TreeEditor()
        root = editor.load('{"a": 1, "b": {"x": 2}}')
        a, b = root.children
        editor.move(a.id, b.id)          # True
        editor.plain()                   # {"b": {"x": 2, "a": 1}}
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        self._config: TreeConfig = config if config is not None else TreeConfig()
        self._root: TreeNode | None = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def loaded(self) -> bool:
        """True when the most recent load succeeded."""
        return self._root is not None

    @property
    def root(self) -> TreeNode:
        return self._require_root()

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------

    def load(self, text: str) -> TreeNode:
        """Parse ``text`` and make it the current document.

        Containers below the root start collapsed.  On failure the editor is
        left empty (``loaded`` is False) and the error propagates.

        Raises:
            InputError: If text is not a str or is blank.
            json.JSONDecodeError: If text is not well-formed JSON.
        """
        try:
            root = parse(text, config=self._config)
        except (InputError, json.JSONDecodeError) as exc:
            logger.debug("load rejected: %s", exc)
            self._root = None
            raise

        presentation.set_default_collapsed(root, is_root=True)
        self._root = root
        logger.debug(
            "loaded document with %d nodes", sum(1 for _ in iter_nodes(root))
        )
        return root

    def text(self, indent: int | None | ConfigIndent = CONFIG_INDENT) -> str:
        """Serialize the document.

        ``indent`` defaults to ``config.indent``; pass None for compact output.
        """
        return to_text(
            self._require_root(),
            indent=self._config.resolve_indent(indent),
            ensure_ascii=self._config.ensure_ascii,
        )

    def plain(self) -> Any:
        return to_plain(self._require_root())

    # ------------------------------------------------------------------
    # Structural requests
    # ------------------------------------------------------------------

    def find(self, node_id: str) -> TreeNode | None:
        return find_by_id(self._root, node_id)

    def move(self, source_id: str, target_id: str) -> bool:
        """Drop ``source_id`` onto ``target_id``; False when rejected."""
        if self._root is None:
            return False
        return move(self._root, source_id, target_id, config=self._config)

    # ------------------------------------------------------------------
    # Presentation state
    # ------------------------------------------------------------------

    def toggle(self, node_id: str) -> bool:
        """Flip the collapsed flag of ``node_id`` and return the new flag.

        Returns False when the node does not exist.
        """
        node = self.find(node_id)
        if node is None:
            return False
        return presentation.toggle_collapsed(node)

    def collapse_all(self) -> None:
        presentation.collapse_all(self._require_root())

    def expand_all(self) -> None:
        presentation.expand_all(self._require_root())

    def _require_root(self) -> TreeNode:
        if self._root is None:
            raise EmptyDocumentError("no document loaded")
        return self._root
