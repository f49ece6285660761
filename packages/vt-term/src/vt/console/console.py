"""Console: a VT100 terminal defined by an input and an output byte stream.

Also holds the escape-sequence formatting helpers used by the console and by
frame rendering. Everything written to the terminal is encoded text; the
input side hands raw bytes to :func:`vt.console.keys.parse_key`.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from vt.console.color import Color
from vt.console.config import ConsoleConfig
from vt.console.keys import parse_key

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Escape constants
# ---------------------------------------------------------------------------

ESC = "\x1b"
CSI = ESC + "["
CLEAR = CSI + "2J"
HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"
ALT_BUFFER = CSI + "?47h"
MAIN_BUFFER = CSI + "?47l"


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_clear() -> str:
    """Return the escape sequence that clears the terminal."""
    return CLEAR


def format_move_up(n: int) -> str:
    return f"{CSI}{n}A"


def format_move_down(n: int) -> str:
    return f"{CSI}{n}B"


def format_move_right(n: int) -> str:
    return f"{CSI}{n}C"


def format_move_left(n: int) -> str:
    return f"{CSI}{n}D"


def format_move_to(line: int, column: int) -> str:
    """Return the escape sequence moving the cursor to *line*, *column*
    (both 1-based)."""
    return f"{CSI}{line};{column}H"


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


class Console:
    """Interface to a terminal over a binary input and output stream.

    Output methods write immediately and flush. ``Console`` is also the
    ``TextSink`` frames render into.
    """

    def __init__(
        self,
        in_stream: BinaryIO,
        out_stream: BinaryIO,
        config: ConsoleConfig | None = None,
    ) -> None:
        self._in = in_stream
        self._out = out_stream
        self.config = config if config is not None else ConsoleConfig()

    # -- output -------------------------------------------------------------

    def write_string(self, data: str) -> None:
        """Write *data* at the current cursor location."""
        self._out.write(data.encode(self.config.encoding))
        self._out.flush()

        if self.config.write_log:
            try:
                with open(self.config.write_log, "a", encoding=self.config.encoding) as f:
                    f.write(data)
            except OSError as exc:
                logger.debug("Cannot append to write log %s: %s", self.config.write_log, exc)

    def clear(self) -> None:
        self.write_string(CLEAR)

    def move_up(self, n: int) -> None:
        self.write_string(format_move_up(n))

    def move_down(self, n: int) -> None:
        self.write_string(format_move_down(n))

    def move_right(self, n: int) -> None:
        self.write_string(format_move_right(n))

    def move_left(self, n: int) -> None:
        self.write_string(format_move_left(n))

    def move_to(self, line: int, column: int) -> None:
        self.write_string(format_move_to(line, column))

    def set_color(self, color: Color) -> None:
        """Set the colour used for subsequent output."""
        self.write_string(color.escape())

    def write_char(self, ch: str) -> None:
        self.write_string(ch)

    def put_char(self, line: int, column: int, ch: str) -> None:
        self.write_string(format_move_to(line, column) + ch)

    def put_string(self, line: int, column: int, text: str) -> None:
        self.write_string(format_move_to(line, column) + text)

    def hide_cursor(self) -> None:
        self.write_string(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write_string(SHOW_CURSOR)

    def alt_buffer(self) -> None:
        """Switch to the alternate screen buffer."""
        self.write_string(ALT_BUFFER)

    def main_buffer(self) -> None:
        """Switch back to the main screen buffer."""
        self.write_string(MAIN_BUFFER)

    # -- input --------------------------------------------------------------

    def read_input(self) -> bytes:
        """Perform one bounded read from the input stream.

        Returns ``b""`` at end of input, or when a non-blocking stream has
        nothing to offer.
        """
        read = getattr(self._in, "read1", None) or self._in.read
        data = read(self.config.read_size)
        if data is None:
            return b""
        return bytes(data)

    def get_key(self) -> int:
        """Read one burst of input and decode it to a key code.

        An empty read decodes to ``Key.UNKNOWN``.
        """
        return parse_key(self.read_input())
