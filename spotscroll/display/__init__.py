"""Display output adapters."""

from spotscroll.display.line_sink import LineSink

__all__ = ["LineSink"]
