"""vt-console: VT100 terminal I/O, colors and key decoding."""

# Colors
from vt.console.color import (
    BLACK,
    BLINK,
    BLUE,
    BRIGHT,
    CYAN,
    DIM,
    GREEN,
    HIDDEN,
    MAGENTA,
    RED,
    RESET,
    REVERSE,
    UNDERSCORE,
    WHITE,
    YELLOW,
    Color,
    format_color,
)

# Configuration
from vt.console.config import ConsoleConfig

# Console I/O and escape formatting
from vt.console.console import (
    Console,
    format_clear,
    format_move_down,
    format_move_left,
    format_move_right,
    format_move_to,
    format_move_up,
)

# Keyboard input decoding
from vt.console.keys import Key, decode, key_name, parse_key

# Raw mode
from vt.console.rawmode import RawMode, TerminalModeError, make_raw

# Utilities
from vt.console.utils import char_width, text_width, truncate_to_width

__all__ = [
    # Colors
    "BLACK",
    "BLINK",
    "BLUE",
    "BRIGHT",
    "CYAN",
    "DIM",
    "GREEN",
    "HIDDEN",
    "MAGENTA",
    "RED",
    "RESET",
    "REVERSE",
    "UNDERSCORE",
    "WHITE",
    "YELLOW",
    "Color",
    "format_color",
    # Configuration
    "ConsoleConfig",
    # Console
    "Console",
    "format_clear",
    "format_move_down",
    "format_move_left",
    "format_move_right",
    "format_move_to",
    "format_move_up",
    # Keys
    "Key",
    "decode",
    "key_name",
    "parse_key",
    # Raw mode
    "RawMode",
    "TerminalModeError",
    "make_raw",
    # Utilities
    "char_width",
    "text_width",
    "truncate_to_width",
]
