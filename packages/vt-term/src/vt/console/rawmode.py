"""Raw terminal mode via :mod:`termios`.

Raw mode turns off line buffering, echo, signal characters and output
post-processing, uses 8-bit characters, and makes every read return as soon
as one byte is available.
"""

from __future__ import annotations

import logging
import termios

logger = logging.getLogger(__name__)

# Indices into the list returned by termios.tcgetattr
_IFLAG = 0
_OFLAG = 1
_CFLAG = 2
_LFLAG = 3
_CC = 6


class TerminalModeError(OSError):
    """Getting or setting terminal attributes failed."""


def make_raw(attrs: list) -> list:
    """Return a copy of *attrs* (as from ``tcgetattr``) set up for raw mode.

    The fixed cfmakeraw-style flag set below is applied explicitly rather
    than through ``tty.setraw``.
    """
    raw = list(attrs)
    raw[_IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
    raw[_OFLAG] &= ~termios.OPOST
    raw[_LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
    raw[_CFLAG] &= ~(termios.CSIZE | termios.PARENB)
    raw[_CFLAG] |= termios.CS8

    cc = list(raw[_CC])
    cc[termios.VMIN] = 1
    cc[termios.VTIME] = 0
    raw[_CC] = cc
    return raw


def _get(fd: int) -> list:
    try:
        return termios.tcgetattr(fd)
    except (termios.error, OSError) as exc:
        raise TerminalModeError(f"cannot read terminal attributes of fd {fd}: {exc}") from exc


def _set(fd: int, when: int, attrs: list) -> None:
    try:
        termios.tcsetattr(fd, when, attrs)
    except (termios.error, OSError) as exc:
        raise TerminalModeError(f"cannot set terminal attributes of fd {fd}: {exc}") from exc


class RawMode:
    """Switch a terminal file descriptor into raw mode and back.

    The attributes in effect before the first :meth:`enter` are the ones
    :meth:`exit` restores. Usable as a context manager::

        with RawMode(sys.stdin.fileno()):
            ...
    """

    def __init__(self, fd: int = 0) -> None:
        self.fd = fd
        self._original: list | None = None

    @property
    def active(self) -> bool:
        return self._original is not None

    def enter(self) -> None:
        attrs = _get(self.fd)
        _set(self.fd, termios.TCSANOW, make_raw(attrs))
        if self._original is None:
            self._original = attrs
        logger.debug("Entered raw mode on fd %d", self.fd)

    def exit(self) -> None:
        if self._original is None:
            return
        _set(self.fd, termios.TCSADRAIN, self._original)
        self._original = None
        logger.debug("Restored terminal mode on fd %d", self.fd)

    def __enter__(self) -> RawMode:
        self.enter()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.exit()
