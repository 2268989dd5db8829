"""Mapping a window on a scaled source image onto a paint target."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from drawkit.geometry import Point2d, Region, Scale, Size


def scale_region(region: Region, scale: Scale) -> Region:
    """Scale a region, rounding back to integers for integral regions."""
    scaled = region.scaled(scale)
    return scaled.cast(int) if region.is_integral else scaled


def unscale_region(region: Region, scale: Scale) -> Region:
    """Undo a scale, rounding back to integers for integral regions."""
    unscaled = region.unscaled(scale)
    return unscaled.cast(int) if region.is_integral else unscaled


def constrain_region(region: Region, size: Size) -> Region:
    """Return the region clipped so it starts and ends within ``size``."""
    width = max(1, size.width)
    height = max(1, size.height)

    top_left = Point2d(
        min(region.top_left.x, width - 1),
        min(region.top_left.y, height - 1),
    )
    region = Region(top_left, region.size)
    bottom_right = region.bottom_right()

    if bottom_right.x <= width and bottom_right.y <= height:
        return region

    bottom_right = Point2d(min(bottom_right.x, width), min(bottom_right.y, height))
    difference = bottom_right - top_left
    new_width, new_height = difference.x, difference.y

    if isinstance(new_width, float):
        # Rounding can leave top_left + size just beyond the limit.
        while top_left.x + new_width > width:
            new_width = math.nextafter(new_width, 0.0)
    if isinstance(new_height, float):
        while top_left.y + new_height > height:
            new_height = math.nextafter(new_height, 0.0)

    return Region(top_left, Size(new_width, new_height))


@dataclass
class View:
    """Source region of an image and the target region it is painted to."""

    source: Region = field(default_factory=Region)
    target: Region = field(default_factory=Region)
    scale: Scale = field(default_factory=Scale)

    def cast(self, kind: type) -> View:
        """Convert both regions to ``int`` (rounded) or ``float``."""
        return View(self.source.cast(kind), self.target.cast(kind), self.scale)

    def has_area(self) -> bool:
        return self.source.size.has_area() and self.target.size.has_area()


def make_view(view_window: Region, source_size: Size, scale: Scale) -> View:
    """Build the view of ``view_window`` over a source image of ``source_size``.

    ``view_window`` is a clipping window on the scaled source, which sits at
    the origin.
    """
    source = Region(Point2d(0, 0), source_size)
    scaled_source = scale_region(source, scale)

    source = unscale_region(scaled_source.intersect(view_window), scale)
    source = constrain_region(source, source_size)

    # A window shifted negative starts painting the target at a positive
    # offset of the same magnitude.
    target_top_left = Point2d(
        -min(0, view_window.top_left.x),
        -min(0, view_window.top_left.y),
    )
    target_intersection = view_window.intersect(scaled_source)
    target = Region(target_top_left, target_intersection.size)

    return View(source, target, scale)