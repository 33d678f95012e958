"""Exception types raised by json-tree-model.

Malformed JSON is not wrapped: ``json.JSONDecodeError`` propagates from the
decoder unchanged, with the decoder's own diagnostic message.
"""

from __future__ import annotations

__all__ = ["EmptyDocumentError", "InputError", "JsonTreeError"]


class JsonTreeError(Exception):
    """Base class for errors raised by this package."""


class InputError(JsonTreeError, ValueError):
    """Input handed to ``parse`` is not text, or is blank after trimming."""


class EmptyDocumentError(JsonTreeError, LookupError):
    """A TreeEditor operation needs a document but none has been loaded."""
