"""Poll playerctl for now-playing text, synchronously or on a background thread."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import threading
from typing import TYPE_CHECKING

from spotscroll.data.playerctl_client import PlayerctlClient, ProviderEnvironmentError

if TYPE_CHECKING:
    from spotscroll.data.mailbox import Mailbox

logger = logging.getLogger(__name__)

INACTIVE_TEXT = b""
STOPPED_STATUS = b"Stopped"


class PollKind(Enum):
    UNAVAILABLE = "unavailable"
    UNCHANGED = "unchanged"
    CHANGED = "changed"


@dataclass(frozen=True)
class PollResult:
    """Outcome of a single poll of the status provider."""

    kind: PollKind
    text: str | None = None


UNAVAILABLE = PollResult(PollKind.UNAVAILABLE)
UNCHANGED = PollResult(PollKind.UNCHANGED)


def changed(text: str) -> PollResult:
    return PollResult(PollKind.CHANGED, text)


def strip_line_terminator(raw: bytes) -> bytes:
    """Drop a single trailing newline (or CRLF) emitted by the provider."""
    if raw.endswith(b"\r\n"):
        return raw[:-2]
    if raw.endswith(b"\n"):
        return raw[:-1]
    return raw


class SourcePoller:
    """Turns playerctl queries into Unavailable / Unchanged / Changed results."""

    def __init__(self, client: PlayerctlClient, format_spec: str, check_status: bool = True) -> None:
        self._client = client
        self._format_spec = format_spec
        self._check_status = check_status
        self._last_seen: bytes | None = None

    def poll(self) -> PollResult:
        """Query the provider once and compare against the last observed text."""
        observed = self._observe()
        if observed is None:
            return UNAVAILABLE
        if observed == self._last_seen:
            return UNCHANGED

        if not observed:
            logger.info("Nothing playing; clearing status text")
        else:
            logger.info("Now playing changed")
        self._last_seen = observed
        return changed(observed.decode("utf-8", errors="replace"))

    def _observe(self) -> bytes | None:
        if not self._client.is_active():
            return INACTIVE_TEXT

        if self._check_status:
            exit_code, raw_status = self._client.query_status()
            if exit_code != 0:
                logger.debug("playerctl status failed; keeping last text")
                return None
            if raw_status.strip() == STOPPED_STATUS:
                return INACTIVE_TEXT

        # playerctl fails intermittently against spotifyd even while it plays.
        exit_code, raw = self._client.query_metadata(self._format_spec)
        if exit_code != 0:
            logger.debug("playerctl metadata failed; keeping last text")
            return None
        return strip_line_terminator(raw)


class BackgroundPoller:
    """Background poller that publishes results to a mailbox on a schedule."""

    def __init__(
        self,
        poller: SourcePoller,
        mailbox: Mailbox,
        poll_interval_seconds: float,
    ) -> None:
        self._poller = poller
        self._mailbox = mailbox
        self._poll_interval_seconds = poll_interval_seconds
        self._error: ProviderEnvironmentError | None = None
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the background polling thread."""
        if self._thread and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Signal the polling thread to stop."""
        self._stop_event.set()

    def raise_if_failed(self) -> None:
        """Re-raise a fatal error hit by the polling thread."""
        if self._error is not None:
            raise self._error

    def _run_loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                result = self._poller.poll()
            except ProviderEnvironmentError as exc:
                logger.error("Background poller stopped: %s", exc)
                self._error = exc
                return
            self._mailbox.put(result)
            self._stop_event.wait(timeout=self._poll_interval_seconds)


__all__ = [
    "UNAVAILABLE",
    "UNCHANGED",
    "BackgroundPoller",
    "PollKind",
    "PollResult",
    "SourcePoller",
    "changed",
    "strip_line_terminator",
]
