"""Scroll state machine for the status line."""

from __future__ import annotations

from dataclasses import dataclass

from spotscroll.data.poller import PollKind, PollResult
from spotscroll.logic.graphemes import split_graphemes


@dataclass(frozen=True)
class ScrollState:
    """Snapshot of the displayed buffer and scroll position."""

    buffer: str
    cursor: int


class ScrollEngine:
    """Owns the display buffer and cycles a fixed-width window over it.

    Text is indexed by grapheme cluster. When the buffer is wider than the
    window, the divider is appended to the scrolled sequence so the end of
    the text and its restart are visibly separated.

    Each window is made of whole clusters from that sequence, but clusters
    that were apart in the text can meet at the wrap point and render as one
    (two lone regional indicators form a flag, a divider starting with a
    combining mark attaches to the last character).
    """

    def __init__(self, width: int, divider: str = "") -> None:
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ValueError(f"Window width must be a positive integer, got {width!r}")
        self._width = width
        self._divider = split_graphemes(divider)
        self._buffer = ""
        self._graphemes: tuple[str, ...] = ()
        self._sequence: tuple[str, ...] = ()
        self._cursor = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def state(self) -> ScrollState:
        return ScrollState(buffer=self._buffer, cursor=self._cursor)

    @property
    def is_scrolling(self) -> bool:
        """True when the buffer does not fit in the window."""
        return len(self._graphemes) > self._width

    def on_poll_result(self, result: PollResult) -> bool:
        """Replace the buffer on new text; returns True when the state was reset."""
        if result.kind is not PollKind.CHANGED or result.text is None:
            return False
        if result.text == self._buffer:
            return False

        self._buffer = result.text
        self._graphemes = split_graphemes(result.text)
        self._sequence = self._graphemes + self._divider if self.is_scrolling else self._graphemes
        self._cursor = 0
        return True

    def tick(self) -> str:
        """Return the visible window and advance the cursor by one grapheme."""
        if not self.is_scrolling:
            return self._buffer

        n = len(self._sequence)
        window = "".join(self._sequence[(self._cursor + i) % n] for i in range(self._width))
        self._cursor = (self._cursor + 1) % n
        return window


__all__ = ["ScrollEngine", "ScrollState"]
