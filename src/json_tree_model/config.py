"""TreeConfig: immutable settings shared by the parse, move and serialize paths.

TreeConfig is a frozen (immutable) dataclass.  Every public entry point takes
``config: TreeConfig | None`` and falls back to ``TreeConfig()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

__all__ = ["CONFIG_INDENT", "ConfigIndent", "TreeConfig"]


class ConfigIndent(Enum):
    """Marker type for an ``indent`` argument that defers to ``TreeConfig.indent``.

    ``None`` already means "compact output", so it cannot double as "not given".
    """

    TOKEN = "config"


CONFIG_INDENT: Final = ConfigIndent.TOKEN


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Immutable configuration for building, editing and serializing trees.

    Attributes:
        indent: Default indent width for ``to_text``.  ``None`` produces
            compact single-line output.  Must be >= 0.
        root_key: Key given to the root node of a parsed tree.
        id_start: Seed of the per-parse IdSequence.  The root receives
            ``str(id_start + 1)``.  Must be >= 0.
        default_key: Placeholder ``unique_key`` uses for an empty key.
        moved_key: Placeholder ``move`` uses for a source without a key.
        key_separator: Joins a colliding key and its counter ("x" -> "x_1").
        ensure_ascii: Forwarded to ``json.dumps``.  Default False keeps
            non-ASCII text readable.
    """

    indent: int | None = 2
    root_key: str = "root"
    id_start: int = 1
    default_key: str = "newKey"
    moved_key: str = "movedKey"
    key_separator: str = "_"
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if self.indent is not None and self.indent < 0:
            msg = f"indent must be >= 0 or None, got {self.indent}"
            raise ValueError(msg)
        if self.id_start < 0:
            msg = f"id_start must be >= 0, got {self.id_start}"
            raise ValueError(msg)
        if not self.default_key:
            msg = f"default_key must be a non-empty string, got {self.default_key!r}"
            raise ValueError(msg)
        if not self.moved_key:
            msg = f"moved_key must be a non-empty string, got {self.moved_key!r}"
            raise ValueError(msg)
        if not self.key_separator:
            msg = (
                f"key_separator must be a non-empty string, got {self.key_separator!r}"
            )
            raise ValueError(msg)

    def resolve_indent(self, indent: int | None | ConfigIndent) -> int | None:
        """Return ``self.indent`` for ``CONFIG_INDENT``, else ``indent`` itself."""
        if indent is CONFIG_INDENT:
            return self.indent
        return indent
