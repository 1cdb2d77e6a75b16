"""Split text into user-perceived characters."""

from __future__ import annotations

import regex

_GRAPHEME = regex.compile(r"\X")


def split_graphemes(text: str) -> tuple[str, ...]:
    """Return the extended grapheme clusters of text, in order."""
    return tuple(_GRAPHEME.findall(text))


__all__ = ["split_graphemes"]
