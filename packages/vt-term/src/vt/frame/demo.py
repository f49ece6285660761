"""vt-demo: a key viewer drawn with frames and sub-frames.

Puts the terminal in raw mode, switches to the alternate screen and lists
every key pressed in a panel until ``q``, Escape or end of input.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from vt.console.color import BLACK, BLUE, BRIGHT, CYAN, RESET, WHITE, YELLOW, Color
from vt.console.config import ConsoleConfig
from vt.console.console import Console
from vt.console.keys import Key, key_name, parse_key
from vt.console.rawmode import RawMode
from vt.console.utils import text_width, truncate_to_width
from vt.frame.frame import BLANK_CELL, Cell, Frame
from vt.frame.geometry import rect

logger = logging.getLogger(__name__)

TITLE = "vt-demo: press keys, q or Esc quits"

TITLE_COLOR = Color(BRIGHT, WHITE, BLUE)
LOG_COLOR = Color(RESET, CYAN, BLACK)
STATUS_COLOR = Color(RESET, BLACK, YELLOW)


class Screen:
    """The demo layout: title bar, key log panel and status line, all views
    onto one root frame."""

    def __init__(self, columns: int, rows: int) -> None:
        rows = max(rows, 3)
        self.root = Frame.new(rect(0, 0, columns, rows))
        self.title = self.root.sub_frame(rect(0, 0, columns, 1))
        self.log = self.root.sub_frame(rect(0, 1, columns, rows - 1))
        self.status = self.root.sub_frame(rect(0, rows - 1, columns, rows))
        self.entries: list[str] = []

    def record(self, code: int) -> None:
        self.entries.append(f"{key_name(code)} ({code:#06x})")
        visible = max(self.log.bounds.dy, 0)
        del self.entries[: max(len(self.entries) - visible, 0)]

    def draw(self, count: int) -> None:
        width = self.root.bounds.dx

        self.title.fill(Cell(" ", TITLE_COLOR))
        title = truncate_to_width(TITLE, width)
        self.title.put_text_rel(max((width - text_width(title)) // 2, 0), 0, TITLE_COLOR, title)

        self.log.clear()
        for i, entry in enumerate(self.entries):
            self.log.put_text_rel(1, i, LOG_COLOR, entry)

        self.status.fill(Cell(" ", STATUS_COLOR))
        self.status.put_text_rel(1, 0, STATUS_COLOR, f"keys: {count}")


def terminal_size(fd: int) -> tuple[int, int]:
    try:
        size = os.get_terminal_size(fd)
        return size.columns, size.lines
    except (ValueError, OSError):
        return 80, 24


def run(console: Console, screen: Screen) -> int:
    """Read and display keys until ``q``, Escape or end of input.

    Returns the number of keys displayed.
    """
    count = 0
    screen.root.fill(BLANK_CELL)
    screen.draw(count)
    screen.root.print(console)

    while True:
        data = console.read_input()
        if not data:
            logger.info("End of input")
            break

        code = parse_key(data)
        if code in (Key.ESCAPE, ord("q")):
            break
        if code == Key.UNKNOWN:
            logger.debug("Ignoring input %r", data)
            continue

        count += 1
        screen.record(code)
        screen.draw(count)
        screen.root.print(console)

    return count


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="vt-demo: terminal key viewer")
    parser.add_argument(
        "--log-level", default="warning", choices=["debug", "info", "warning", "error"]
    )
    parser.add_argument("--log-file", default=None, help="Write logs to this file instead of stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=args.log_file,
    )

    config = ConsoleConfig.from_env()
    console = Console(sys.stdin.buffer, sys.stdout.buffer, config)
    columns, rows = terminal_size(sys.stdout.fileno())
    screen = Screen(columns, rows)

    with RawMode(sys.stdin.fileno()):
        console.alt_buffer()
        console.hide_cursor()
        console.clear()
        try:
            count = run(console, screen)
        finally:
            console.write_string(Color().escape())
            console.show_cursor()
            console.main_buffer()

    logger.info("Displayed %d keys", count)


if __name__ == "__main__":
    main()
