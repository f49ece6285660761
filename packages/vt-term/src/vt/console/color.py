"""VT100 color model: an (attribute, foreground, background) triple.

Colors are plain immutable values. Their only behaviour is rendering to the
SGR escape sequence ``ESC[a;3f;4bm`` understood by VT100-compatible terminals.
"""

from __future__ import annotations

from dataclasses import dataclass

_CSI = "\x1b["

# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------

RESET = 0
BRIGHT = 1
DIM = 2
UNDERSCORE = 4
BLINK = 5
REVERSE = 7
HIDDEN = 8

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

BLACK = 0
RED = 1
GREEN = 2
YELLOW = 3
BLUE = 4
MAGENTA = 5
CYAN = 6
WHITE = 7

_MAX_ATTR = 8
_MAX_COLOR = 7


def _check(value: int, upper: int, what: str) -> None:
    # bool is an int subclass but never a meaningful color component
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"invalid {what}: {value!r}")
    if value < 0 or value > upper:
        raise ValueError(f"invalid {what}: {value} (expected 0..{upper})")


def format_color(attr: int, fore: int, back: int) -> str:
    """Return the escape sequence selecting attribute *attr*, foreground
    colour *fore* and background colour *back*.

    Raises ``ValueError`` if any component is out of range.
    """
    _check(attr, _MAX_ATTR, "attribute")
    _check(fore, _MAX_COLOR, "foreground colour")
    _check(back, _MAX_COLOR, "background colour")
    return f"{_CSI}{attr};{fore + 30};{back + 40}m"


@dataclass(frozen=True)
class Color:
    """A VT100-compatible colour.

    The zero value ``Color()`` is reset attributes, black on black, and is
    the colour every render starts from.
    """

    attr: int = RESET
    fore: int = BLACK
    back: int = BLACK

    def __post_init__(self) -> None:
        _check(self.attr, _MAX_ATTR, "attribute")
        _check(self.fore, _MAX_COLOR, "foreground colour")
        _check(self.back, _MAX_COLOR, "background colour")

    def escape(self) -> str:
        return format_color(self.attr, self.fore, self.back)

    def __str__(self) -> str:
        return self.escape()
