"""JSON tree model - an identified, editable tree built from JSON text."""

from __future__ import annotations

from json_tree_model.api import find_by_id, move, parse, to_plain, to_text
from json_tree_model.config import CONFIG_INDENT, TreeConfig
from json_tree_model.editor import TreeEditor
from json_tree_model.errors import EmptyDocumentError, InputError, JsonTreeError
from json_tree_model.tree import IdSequence, NodeType, TreeBuilder, TreeNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "CONFIG_INDENT",
    "EmptyDocumentError",
    "IdSequence",
    "InputError",
    "JsonTreeError",
    "NodeType",
    "TreeBuilder",
    "TreeConfig",
    "TreeEditor",
    "TreeNode",
    "find_by_id",
    "move",
    "parse",
    "to_plain",
    "to_text",
]
