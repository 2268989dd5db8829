"""Mouse drag geometry relative to the point where the drag started."""

from __future__ import annotations

from dataclasses import dataclass, field

from drawkit.geometry import Point2d, Size


@dataclass
class Drag:
    """A drag that began at ``start`` on a feature located at ``offset``."""

    start: Point2d
    offset: Point2d = field(default_factory=lambda: Point2d(0.0, 0.0))
    index: int = 0

    def position(self, end: Point2d) -> Point2d:
        """Where the dragged feature is when the pointer is at ``end``."""
        delta = (end - self.start).cast(float)
        return self.offset.cast(float) + delta

    def drag_center(self, end: Point2d) -> Point2d:
        return (self.start + end).cast(float) / 2.0

    def size(self, end: Point2d) -> Size:
        delta = (end - self.start).cast(float)
        return Size(delta.x, delta.y)

    def magnitude(self, end: Point2d) -> float:
        return (end - self.start).magnitude()

    def angle(self, end: Point2d) -> float:
        """Direction of the drag in degrees."""
        return (end - self.start).angle()