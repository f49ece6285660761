"""Integer points and half-open rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle containing points with
    ``min.x <= x < max.x`` and ``min.y <= y < max.y``.

    A rectangle is empty when it contains no points, which includes
    rectangles whose corners are inverted. Use :func:`rect` to build a
    well-formed one from coordinates.
    """

    min: Point = Point()
    max: Point = Point()

    @property
    def dx(self) -> int:
        return self.max.x - self.min.x

    @property
    def dy(self) -> int:
        return self.max.y - self.min.y

    def empty(self) -> bool:
        return self.min.x >= self.max.x or self.min.y >= self.max.y

    def contains(self, x: int, y: int) -> bool:
        return self.min.x <= x < self.max.x and self.min.y <= y < self.max.y

    def intersect(self, other: Rectangle) -> Rectangle:
        """Return the largest rectangle inside both; the zero rectangle if
        they do not overlap."""
        r = Rectangle(
            Point(max(self.min.x, other.min.x), max(self.min.y, other.min.y)),
            Point(min(self.max.x, other.max.x), min(self.max.y, other.max.y)),
        )
        if r.empty():
            return Rectangle()
        return r


def rect(x0: int, y0: int, x1: int, y1: int) -> Rectangle:
    """Return the rectangle with corners (x0, y0) and (x1, y1), swapping
    coordinates as needed so that min <= max."""
    if x0 > x1:
        x0, x1 = x1, x0
    if y0 > y1:
        y0, y1 = y1, y0
    return Rectangle(Point(x0, y0), Point(x1, y1))
