"""IdSequence: monotonic string id generator threaded through the builder."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class IdSequence:
    """Process-local counter handing out string ids.

    The counter pre-increments, so the first id drawn is ``str(start + 1)``.
    One sequence is created per top-level parse; ids never repeat within it
    but are not unique across sequences.

    Example::
        ids = IdSequence()
        next(ids)   # "2"
        next(ids)   # "3"
    """

    start: int = 1
    _current: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self._current = self.start

    def __iter__(self) -> IdSequence:
        return self

    def __next__(self) -> str:
        self._current += 1
        return str(self._current)

    @property
    def current(self) -> int:
        """The last number handed out (``start`` before the first draw)."""
        return self._current
