"""A 2-D frame of coloured character cells printable to a terminal.

A :class:`Frame` is a rectangular window onto a flat list of :class:`Cell`
values. Frames made with :meth:`Frame.sub_frame` share that list with their
parent, so independent regions of one screen (panels) can be drawn, cleared
and printed on their own while every write lands in the same canvas.

All coordinates are absolute: a frame's bounds need not start at the origin.
Reads and writes outside a frame's bounds are silently ignored.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Protocol, Union

from vt.console.color import Color
from vt.console.console import format_move_to
from vt.frame.geometry import Point, Rectangle

# ---------------------------------------------------------------------------
# Cells
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Cell:
    """A single character and its colour.

    An empty ``char`` (or NUL) marks a cell that was never written; it prints
    as a space. ``char`` holds at most one character.
    """

    char: str = ""
    color: Color = field(default_factory=Color)

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) > 1:
            raise ValueError(f"cell holds at most one character, got {self.char!r}")


# Characters that mark an unset cell.
_UNSET_CHARS = ("", "\x00")


EMPTY_CELL = Cell()
BLANK_CELL = Cell(" ", Color())


# ---------------------------------------------------------------------------
# put_text items
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextRun:
    """Text written one column per character."""

    text: str


@dataclass(frozen=True)
class ColorChange:
    """Switch the colour of the text that follows."""

    color: Color


TextItem = Union[TextRun, ColorChange, str, Color]


def _normalize(item: TextItem) -> TextRun | ColorChange:
    if isinstance(item, (TextRun, ColorChange)):
        return item
    if isinstance(item, str):
        return TextRun(item)
    if isinstance(item, Color):
        return ColorChange(item)
    raise TypeError(
        f"put_text accepts only TextRun, ColorChange, str and Color items, "
        f"not {type(item).__name__}"
    )


class TextSink(Protocol):
    """Anything rendered escape sequences can be written to."""

    def write_string(self, data: str) -> None: ...


# ---------------------------------------------------------------------------
# Frame
# ---------------------------------------------------------------------------


class Frame:
    """A rectangular grid of cells.

    ``data`` is the backing list, possibly shared with other frames.
    ``stride`` is the number of cells between vertically adjacent cells: the
    width of the frame the storage was allocated for, not of this view.
    ``offset`` is the index in ``data`` of the cell at ``bounds.min``.
    """

    def __init__(
        self,
        data: list[Cell] | None = None,
        bounds: Rectangle | None = None,
        stride: int = 0,
        offset: int = 0,
    ) -> None:
        self.data: list[Cell] = data if data is not None else []
        self.bounds: Rectangle = bounds if bounds is not None else Rectangle()
        self.stride = stride
        self.offset = offset

    @classmethod
    def new(cls, r: Rectangle) -> Frame:
        """Allocate a frame covering *r* with every cell empty.

        A rectangle with no area gives a frame with no cells.
        """
        w, h = max(r.dx, 0), max(r.dy, 0)
        return cls([EMPTY_CELL] * (w * h), r, w)

    def __repr__(self) -> str:
        b = self.bounds
        return (
            f"Frame(({b.min.x},{b.min.y})-({b.max.x},{b.max.y}), "
            f"stride={self.stride}, offset={self.offset})"
        )

    # -- addressing ---------------------------------------------------------

    def cell_offset(self, x: int, y: int) -> int:
        """Return the index in ``data`` of the cell at *x*, *y*."""
        return self.offset + (y - self.bounds.min.y) * self.stride + (x - self.bounds.min.x)

    def at(self, x: int, y: int) -> Cell:
        """Return the cell at *x*, *y*, or ``EMPTY_CELL`` outside the bounds."""
        if not self.bounds.contains(x, y):
            return EMPTY_CELL
        return self.data[self.cell_offset(x, y)]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Replace the cell at *x*, *y* if it lies within the bounds."""
        if not self.bounds.contains(x, y):
            return
        self.data[self.cell_offset(x, y)] = cell

    # -- filling ------------------------------------------------------------

    def fill_rect(self, r: Rectangle, cell: Cell) -> None:
        """Set every cell inside both *r* and the bounds to *cell*."""
        r = self.bounds.intersect(r)
        if r.empty():
            return

        width = r.dx
        for y in range(r.min.y, r.max.y):
            start = self.cell_offset(r.min.x, y)
            self.data[start : start + width] = [cell] * width

    def fill(self, cell: Cell) -> None:
        self.fill_rect(self.bounds, cell)

    def clear_rect(self, r: Rectangle) -> None:
        """Blank the cells in *r*: spaces in the default colour."""
        self.fill_rect(r, BLANK_CELL)

    def clear(self) -> None:
        self.clear_rect(self.bounds)

    # -- text ---------------------------------------------------------------

    def put_text(self, x: int, y: int, *items: TextItem) -> None:
        """Write text starting at *x*, *y*.

        Items are applied in order: text advances one column per character,
        a colour changes the colour of the text after it. Text starts in the
        default colour, is truncated at the right edge of the frame and never
        wraps. Nothing is written when *y* is outside the frame.

        The text must not contain escape sequences.
        """
        if y < self.bounds.min.y or y >= self.bounds.max.y:
            return

        color = Color()
        for item in map(_normalize, items):
            if x >= self.bounds.max.x:
                break

            if isinstance(item, ColorChange):
                color = item.color
                continue

            for ch in item.text:
                if x >= self.bounds.max.x:
                    break
                self.set(x, y, Cell(ch, color))
                x += 1

    def put_text_rel(self, x: int, y: int, *items: TextItem) -> None:
        """Like :meth:`put_text` with *x*, *y* relative to the frame's
        top-left corner."""
        p = self.bounds.min + Point(x, y)
        self.put_text(p.x, p.y, *items)

    # -- output -------------------------------------------------------------

    def render_rect(self, r: Rectangle) -> str:
        """Return the escape-sequence stream that draws the cells of *r*.

        Each row starts with a cursor move; a colour sequence is emitted only
        where the colour differs from the last one emitted, starting from the
        default colour.
        """
        r = self.bounds.intersect(r)
        if r.empty():
            return ""

        parts: list[str] = []
        color = Color()
        for y in range(r.min.y, r.max.y):
            parts.append(format_move_to(y + 1, r.min.x + 1))
            for x in range(r.min.x, r.max.x):
                cell = self.at(x, y)
                if cell.color != color:
                    color = cell.color
                    parts.append(color.escape())
                parts.append(" " if cell.char in _UNSET_CHARS else cell.char)
        return "".join(parts)

    def print_rect(self, sink: TextSink, r: Rectangle) -> None:
        """Write the cells inside *r* to *sink* in one piece."""
        data = self.render_rect(r)
        if data:
            sink.write_string(data)

    def print(self, sink: TextSink) -> None:
        self.print_rect(sink, self.bounds)

    # -- views --------------------------------------------------------------

    def sub_frame(self, r: Rectangle) -> Frame:
        """Return a frame over the part of *r* inside the bounds.

        The new frame shares ``data`` with this one. An empty intersection
        gives an empty ``Frame()``.
        """
        r = r.intersect(self.bounds)
        if r.empty():
            return Frame()

        return Frame(
            self.data,
            r,
            self.stride,
            self.cell_offset(r.min.x, r.min.y),
        )

    def rows(self) -> Iterator[list[Cell]]:
        """Yield the cells of each row, top to bottom."""
        for y in range(self.bounds.min.y, self.bounds.max.y):
            yield [self.at(x, y) for x in range(self.bounds.min.x, self.bounds.max.x)]
