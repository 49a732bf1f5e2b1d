"""Geometric primitives for layout computation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable


# Two floats closer than this are treated as equal (rounding noise)
NEARLY_EQUAL_TOLERANCE = 1e-11


def _nearly_equal(a: float, b: float, tolerance: float) -> bool:
    if a == b:  # covers matching infinities
        return True
    return abs(a - b) < tolerance


@dataclass(frozen=True)
class Point:
    """A coordinate in pixel space, top-left origin."""

    x: float
    y: float

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> Point:
        return Point(self.x + dx, self.y + dy)

    def is_nearly_equal(
        self, other: Point, tolerance: float = NEARLY_EQUAL_TOLERANCE
    ) -> bool:
        return (_nearly_equal(self.x, other.x, tolerance)
                and _nearly_equal(self.y, other.y, tolerance))

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Size:
    """A width/height footprint."""

    width: float
    height: float

    @classmethod
    def zero(cls) -> Size:
        return cls(0.0, 0.0)

    def union(self, other: Size) -> Size:
        """Smallest size containing both sizes."""
        return Size(max(self.width, other.width), max(self.height, other.height))

    def is_nearly_equal(
        self, other: Size, tolerance: float = NEARLY_EQUAL_TOLERANCE
    ) -> bool:
        return (_nearly_equal(self.width, other.width, tolerance)
                and _nearly_equal(self.height, other.height, tolerance))

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixel space.

    The origin is always the top-left corner.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_origin(cls, origin: Point, size: Size) -> Rect:
        return cls(origin.x, origin.y, size.width, size.height)

    @classmethod
    def zero(cls) -> Rect:
        return cls(0.0, 0.0, 0.0, 0.0)

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def union(self, other: Rect) -> Rect:
        """Smallest rect containing both rects."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return Rect(x, y, right - x, bottom - y)

    def is_nearly_equal(
        self, other: Rect, tolerance: float = NEARLY_EQUAL_TOLERANCE
    ) -> bool:
        return (self.origin.is_nearly_equal(other.origin, tolerance)
                and self.size.is_nearly_equal(other.size, tolerance))

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


def union_all(rects: Iterable[Rect]) -> Rect:
    """Reduce rects to their bounding rect. An empty input gives the zero rect."""
    bounding: Rect | None = None
    for rect in rects:
        bounding = rect if bounding is None else bounding.union(rect)
    return bounding if bounding is not None else Rect.zero()


@dataclass(frozen=True)
class ProposedSize:
    """Space offered to a layout by its host.

    Each dimension is either a number, ``math.inf`` (unbounded) or
    None (unspecified: use the ideal size).
    """

    width: float | None = None
    height: float | None = None

    @classmethod
    def unspecified(cls) -> ProposedSize:
        return cls(None, None)

    @classmethod
    def infinity(cls) -> ProposedSize:
        return cls(math.inf, math.inf)

    @property
    def is_unbounded(self) -> bool:
        """True when both dimensions are infinite."""
        return (self.width is not None and math.isinf(self.width)
                and self.height is not None and math.isinf(self.height))
