"""Single-slot handoff between the background poller and the display loop."""

from __future__ import annotations

import threading

from spotscroll.data.poller import PollKind, PollResult


class Mailbox:
    """Holds at most one unread poll result; newer results overwrite older ones."""

    def __init__(self) -> None:
        self._slot: PollResult | None = None
        self._lock = threading.Lock()

    def put(self, result: PollResult) -> None:
        """Publish a result, replacing any unread one.

        An unread text change is kept when the incoming result carries no
        text, so the reader always sees the latest text.
        """
        with self._lock:
            if (
                self._slot is not None
                and self._slot.kind is PollKind.CHANGED
                and result.kind is not PollKind.CHANGED
            ):
                return
            self._slot = result

    def take(self) -> PollResult | None:
        """Return and clear the unread result without blocking."""
        with self._lock:
            result = self._slot
            self._slot = None
            return result


__all__ = ["Mailbox"]
