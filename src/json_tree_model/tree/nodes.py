"""TreeNode dataclass, NodeType StrEnum and the value classifier.

Provides the data types the builder, locator and mutator operate on.  A tree
is a graph of ``TreeNode`` objects where ownership flows strictly from a
node's ``children`` list to each child; the ``parent`` link is a weak,
non-owning back-reference.
"""

from __future__ import annotations

import weakref
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any


class NodeType(StrEnum):
    """Enumeration of the six JSON value kinds a node can represent.

    StrEnum values are the lowercased member names:
    - OBJECT  -> "object"  : JSON object {}
    - ARRAY   -> "array"   : JSON array []
    - STRING  -> "string"  : JSON string
    - NUMBER  -> "number"  : JSON number (int or float)
    - BOOLEAN -> "boolean" : true / false
    - NULL    -> "null"    : null
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()

    @property
    def is_container(self) -> bool:
        return self in (NodeType.OBJECT, NodeType.ARRAY)


def classify(value: Any) -> NodeType:
    """Return the NodeType for a decoded JSON value.

    bool MUST be checked before the numeric branch: bool subclasses int.

    Raises:
        TypeError: If value is not something ``json.loads`` could produce.
    """
    if isinstance(value, bool):
        return NodeType.BOOLEAN
    if isinstance(value, (list, tuple)):
        return NodeType.ARRAY
    if value is None:
        return NodeType.NULL
    if isinstance(value, Mapping):
        return NodeType.OBJECT
    if isinstance(value, str):
        return NodeType.STRING
    if isinstance(value, (int, float)):
        return NodeType.NUMBER
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass(eq=False, slots=True, weakref_slot=True)
class TreeNode:
    """A node in the editable JSON tree.

    Nodes compare by identity (``eq=False``); two nodes holding the same
    value are still different nodes.  Lookups go through ``id``.

    Attributes:
        id:        Unique within its tree, assigned once by the builder.
        key:       Property name for object children, stringified index for
                   array children, ``None`` only for a root.
        type:      Kind of value represented (see NodeType).
        value:     Scalar payload for leaf kinds; ``None`` for containers.
        children:  Owned child nodes, in serialization order.
        collapsed: Presentation flag, never read by structural operations.
        parent:    Owning node or ``None`` for the root (weak reference).
    """

    id: str
    key: str | None
    type: NodeType
    value: Any = None
    children: list[TreeNode] = field(default_factory=list)
    collapsed: bool = False
    _parent: weakref.ref[TreeNode] | None = field(
        default=None, init=False, repr=False
    )

    @property
    def parent(self) -> TreeNode | None:
        """Owning node, or None for the root.

        The link is weak.  Parents own their children, so holding the root
        keeps the whole tree alive, but holding a subtree does not keep its
        ancestors alive: once the root is dropped, the subtree's top node
        reports None here and ``is_root`` turns True.  Keep a reference to
        the root for as long as its nodes are in use.
        """
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: TreeNode | None) -> None:
        self._parent = None if node is None else weakref.ref(node)

    @property
    def is_container(self) -> bool:
        return self.type.is_container

    @property
    def is_leaf(self) -> bool:
        return not self.type.is_container

    @property
    def is_root(self) -> bool:
        """True when the node has no live parent; see ``parent``."""
        return self.parent is None

    def index_in_parent(self) -> int:
        """Position of this node among its parent's children, -1 when rootless."""
        parent = self.parent
        if parent is None:
            return -1
        for idx, child in enumerate(parent.children):
            if child.id == self.id:
                return idx
        return -1
