"""Process-level access to pgrep and playerctl."""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)


class ProviderEnvironmentError(RuntimeError):
    """Raised when pgrep or playerctl cannot be executed at all."""


class PlayerctlClient:
    """Thin wrapper around pgrep and playerctl using subprocess."""

    def __init__(
        self,
        player: str = "spotifyd",
        process_name: str = "spotifyd",
        pgrep: str = "pgrep",
        playerctl: str = "playerctl",
    ) -> None:
        self._player = player
        self._process_name = process_name
        self._pgrep = pgrep
        self._playerctl = playerctl

    def is_active(self) -> bool:
        """Return True when the subject process is running."""
        exit_code, _ = self._run([self._pgrep, self._process_name])
        return exit_code == 0

    def query_status(self) -> tuple[int, bytes]:
        """Ask playerctl for the playback status; returns (exit_code, stdout)."""
        return self._run([self._playerctl, f"--player={self._player}", "status"])

    def query_metadata(self, format_spec: str) -> tuple[int, bytes]:
        """Ask playerctl for formatted metadata; returns (exit_code, stdout)."""
        return self._run(
            [self._playerctl, f"--player={self._player}", "metadata", "--format", format_spec]
        )

    def _run(self, args: list[str]) -> tuple[int, bytes]:
        try:
            completed = subprocess.run(args, capture_output=True, check=False)
        except OSError as exc:
            raise ProviderEnvironmentError(f"Failed to execute {args[0]}: {exc}") from exc

        if completed.returncode != 0:
            logger.debug("%s exited with status %d", args[0], completed.returncode)
        return completed.returncode, completed.stdout


__all__ = ["PlayerctlClient", "ProviderEnvironmentError"]
