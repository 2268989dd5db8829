"""Plane geometry primitives: points, sizes, scales and rectangular regions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

Number = Union[int, float]


class DrawError(RuntimeError):
    """Raised when a drawing operation cannot be carried out."""


def _round_half_away(value: Number) -> int:
    magnitude = int(math.floor(abs(value) + 0.5))
    return magnitude if value >= 0 else -magnitude


def _convert(value: Number, kind: type) -> Number:
    if kind is int:
        return _round_half_away(value)
    if kind is float:
        return float(value)
    raise DrawError(f"unsupported numeric kind: {kind!r}")


@dataclass(frozen=True)
class Point2d:
    """A point (or displacement) in the plane."""

    x: Number = 0
    y: Number = 0

    def __add__(self, other: Point2d) -> Point2d:
        return Point2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2d) -> Point2d:
        return Point2d(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point2d:
        return Point2d(-self.x, -self.y)

    def __mul__(self, factor: Number) -> Point2d:
        return Point2d(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> Point2d:
        return Point2d(self.x / divisor, self.y / divisor)

    def distance(self, other: Point2d) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def magnitude(self) -> float:
        """Length of the vector from the origin to this point."""
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Direction of this vector from the positive x axis, in degrees."""
        return math.degrees(math.atan2(self.y, self.x))

    @property
    def is_integral(self) -> bool:
        return isinstance(self.x, int) and isinstance(self.y, int)

    def cast(self, kind: type) -> Point2d:
        """Convert the coordinates to ``int`` (rounded) or ``float``."""
        return Point2d(_convert(self.x, kind), _convert(self.y, kind))


@dataclass(frozen=True)
class ValuePoint(Point2d):
    """A point carrying a value, such as a pixel sample."""

    value: Number = 0


@dataclass(frozen=True)
class Size:
    """Width and height of a rectangle."""

    width: Number = 0
    height: Number = 0

    def __mul__(self, factor: Number) -> Size:
        return Size(self.width * factor, self.height * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> Size:
        return Size(self.width / divisor, self.height / divisor)

    def area(self) -> Number:
        return self.width * self.height

    def has_area(self) -> bool:
        return self.width > 0 and self.height > 0

    def to_point(self) -> Point2d:
        return Point2d(self.width, self.height)

    @property
    def is_integral(self) -> bool:
        return isinstance(self.width, int) and isinstance(self.height, int)

    def cast(self, kind: type) -> Size:
        """Convert the dimensions to ``int`` (rounded) or ``float``."""
        return Size(_convert(self.width, kind), _convert(self.height, kind))


@dataclass(frozen=True)
class Scale:
    """Independent horizontal and vertical scale factors."""

    horizontal: float = 1.0
    vertical: float = 1.0


def _non_negative(value: Number) -> Number:
    return value if value > 0 else value - value


@dataclass(frozen=True)
class Region:
    """An axis-aligned rectangle given by its top-left corner and size."""

    top_left: Point2d = field(default_factory=Point2d)
    size: Size = field(default_factory=Size)

    def bottom_right(self) -> Point2d:
        return Point2d(
            self.top_left.x + self.size.width,
            self.top_left.y + self.size.height,
        )

    def has_area(self) -> bool:
        return self.size.has_area()

    def intersect(self, other: Region) -> Region:
        """The overlap of two regions; it has no area when they are disjoint."""
        mine = self.bottom_right()
        theirs = other.bottom_right()
        left = max(self.top_left.x, other.top_left.x)
        top = max(self.top_left.y, other.top_left.y)
        right = min(mine.x, theirs.x)
        bottom = min(mine.y, theirs.y)
        return Region(
            Point2d(left, top),
            Size(_non_negative(right - left), _non_negative(bottom - top)),
        )

    def scaled(self, scale: Scale) -> Region:
        return Region(
            Point2d(
                self.top_left.x * scale.horizontal,
                self.top_left.y * scale.vertical,
            ),
            Size(
                self.size.width * scale.horizontal,
                self.size.height * scale.vertical,
            ),
        )

    def unscaled(self, scale: Scale) -> Region:
        if scale.horizontal == 0 or scale.vertical == 0:
            raise DrawError("cannot unscale by a zero scale factor")
        return Region(
            Point2d(
                self.top_left.x / scale.horizontal,
                self.top_left.y / scale.vertical,
            ),
            Size(
                self.size.width / scale.horizontal,
                self.size.height / scale.vertical,
            ),
        )

    @property
    def is_integral(self) -> bool:
        return self.top_left.is_integral and self.size.is_integral

    def cast(self, kind: type) -> Region:
        """Convert all coordinates to ``int`` (rounded) or ``float``."""
        return Region(self.top_left.cast(kind), self.size.cast(kind))