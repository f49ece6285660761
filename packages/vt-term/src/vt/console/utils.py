"""Terminal text width helpers."""

from __future__ import annotations

import wcwidth as _wcwidth


def char_width(ch: str) -> int:
    """Return the number of columns *ch* occupies on a terminal.

    Control characters and combining marks take no columns.
    """
    return max(_wcwidth.wcwidth(ch), 0)


def text_width(text: str) -> int:
    """Return the visible column width of *text*."""
    width = _wcwidth.wcswidth(text)
    if width >= 0:
        return width
    # wcswidth gives up on control characters; count the rest
    return sum(char_width(ch) for ch in text)


def truncate_to_width(text: str, width: int) -> str:
    """Cut *text* so that it occupies at most *width* columns."""
    if width <= 0:
        return ""
    used = 0
    for i, ch in enumerate(text):
        w = char_width(ch)
        if used + w > width:
            return text[:i]
        used += w
    return text
