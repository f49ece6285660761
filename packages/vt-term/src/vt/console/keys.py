"""Keyboard input decoding for VT100-compatible terminals.

A single read from the terminal is turned into one integer key code. Plain
bytes decode to their own ordinal; the escape sequences a VT100 terminal
sends for cursor and editing keys decode to named codes in the Unicode
private use area (U+E000..U+F8FF), so they can never collide with text.

Decoding never fails: anything unrecognised becomes ``Key.UNKNOWN`` (0).
A read is assumed to hold at most one key; when a terminal delivers several
keys in one burst only the first is reported.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_ESC = 0x1B


# ---------------------------------------------------------------------------
# Key codes
# ---------------------------------------------------------------------------


class Key:
    """Named key codes."""

    UNKNOWN = 0

    TAB = 9
    ENTER = 13
    ESCAPE = 27
    BACKSPACE = 127

    # Unprintable keys, private use area
    UP = 0xE004
    DOWN = 0xE005
    RIGHT = 0xE006
    LEFT = 0xE007
    HOME = 0xE008
    END = 0xE009
    PAGE_UP = 0xE00A
    PAGE_DOWN = 0xE00B
    INSERT = 0xE00C
    DELETE = 0xE00D
    KP_HOME = 0xE00E
    KP_END = 0xE00F
    KP_PAGE_UP = 0xE010
    KP_PAGE_DOWN = 0xE011


KEY_NAMES: dict[int, str] = {
    Key.UNKNOWN: "unknown",
    Key.TAB: "tab",
    Key.ENTER: "enter",
    Key.ESCAPE: "escape",
    Key.BACKSPACE: "backspace",
    Key.UP: "up",
    Key.DOWN: "down",
    Key.RIGHT: "right",
    Key.LEFT: "left",
    Key.HOME: "home",
    Key.END: "end",
    Key.PAGE_UP: "pageUp",
    Key.PAGE_DOWN: "pageDown",
    Key.INSERT: "insert",
    Key.DELETE: "delete",
    Key.KP_HOME: "kpHome",
    Key.KP_END: "kpEnd",
    Key.KP_PAGE_UP: "kpPageUp",
    Key.KP_PAGE_DOWN: "kpPageDown",
    32: "space",
}

# Bytes following "ESC [" -> key code. Matched against the whole remainder.
CSI_SEQUENCES: dict[bytes, int] = {
    b"A": Key.UP,
    b"B": Key.DOWN,
    b"C": Key.RIGHT,
    b"D": Key.LEFT,
    b"2~": Key.INSERT,
    b"3~": Key.DELETE,
    b"5~": Key.PAGE_UP,
    b"6~": Key.PAGE_DOWN,
}

# First byte following "ESC O" -> key code.
SS3_SEQUENCES: dict[int, int] = {
    ord("H"): Key.HOME,
    ord("F"): Key.END,
}


def key_name(code: int) -> str:
    """Return a human readable name for a key code.

    Printable ASCII maps to the character itself, other unnamed codes to
    their hex value.
    """
    name = KEY_NAMES.get(code)
    if name is not None:
        return name
    if 0x21 <= code <= 0x7E:
        return chr(code)
    return f"0x{code:02x}"


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _parse_ss3(buf: bytes) -> int:
    if not buf:
        return Key.UNKNOWN
    return SS3_SEQUENCES.get(buf[0], Key.UNKNOWN)


def _parse_csi(buf: bytes) -> int:
    return CSI_SEQUENCES.get(bytes(buf), Key.UNKNOWN)


def _parse_esc(buf: bytes) -> int:
    if not buf:
        return Key.ESCAPE
    first = buf[0]
    if first == ord("["):
        return _parse_csi(buf[1:])
    if first == ord("O"):
        return _parse_ss3(buf[1:])
    return Key.UNKNOWN


def parse_key(data: bytes) -> int:
    """Decode the bytes of a single terminal read into a key code.

    Bytes not starting with ESC decode to the first byte's value (any
    trailing bytes are ignored). ESC alone is ``Key.ESCAPE``; ``ESC [`` and
    ``ESC O`` sequences are looked up in :data:`CSI_SEQUENCES` and
    :data:`SS3_SEQUENCES`. Everything else, including empty input, is
    ``Key.UNKNOWN``.
    """
    if not data:
        return Key.UNKNOWN

    if data[0] == _ESC:
        code = _parse_esc(data[1:])
        if code == Key.UNKNOWN:
            logger.debug("Unrecognized escape sequence %r", data)
        return code

    return data[0]


decode = parse_key
