"""Line output for status-bar hosts."""

from __future__ import annotations

import sys
from typing import TextIO


class LineSink:
    """Write one status line per tick and flush so the host redraws."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write_line(self, text: str) -> None:
        self._stream.write(f"{text}\n")
        self._stream.flush()


__all__ = ["LineSink"]
