"""vt-frame: cell-grid frame buffers rendered with VT100 escape sequences."""

from vt.frame.frame import (
    BLANK_CELL,
    EMPTY_CELL,
    Cell,
    ColorChange,
    Frame,
    TextItem,
    TextRun,
    TextSink,
)
from vt.frame.geometry import Point, Rectangle, rect

__all__ = [
    "BLANK_CELL",
    "EMPTY_CELL",
    "Cell",
    "ColorChange",
    "Frame",
    "TextItem",
    "TextRun",
    "TextSink",
    "Point",
    "Rectangle",
    "rect",
]
