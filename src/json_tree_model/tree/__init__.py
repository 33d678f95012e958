"""Tree subpackage: the identified JSON tree and the operations on it.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing one node of the editable tree
- NodeType: StrEnum of the six JSON value kinds
- IdSequence: explicit id generator threaded through the builder
- TreeBuilder / parse: decoded value or JSON text -> identified tree
- to_plain / to_text: identified tree -> plain value or JSON text
- find_by_id / is_descendant / iter_ancestors / iter_nodes: read-only lookups
- detach / unique_key / renormalize_array_keys / move: structural edits
- check_tree: invariant checker
"""

from json_tree_model.tree.builder import TreeBuilder, parse
from json_tree_model.tree.ids import IdSequence
from json_tree_model.tree.locator import (
    find_by_id,
    is_descendant,
    iter_ancestors,
    iter_nodes,
)
from json_tree_model.tree.mutator import (
    detach,
    move,
    renormalize_array_keys,
    unique_key,
)
from json_tree_model.tree.nodes import NodeType, TreeNode, classify
from json_tree_model.tree.serializer import to_plain, to_text
from json_tree_model.tree.validation import check_tree

__all__ = [
    "IdSequence",
    "NodeType",
    "TreeBuilder",
    "TreeNode",
    "check_tree",
    "classify",
    "detach",
    "find_by_id",
    "is_descendant",
    "iter_ancestors",
    "iter_nodes",
    "move",
    "parse",
    "renormalize_array_keys",
    "to_plain",
    "to_text",
    "unique_key",
]
