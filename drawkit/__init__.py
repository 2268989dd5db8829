"""Geometry, view, drag, hue, selection, settings and curve helpers for 2D drawing tools."""

__version__ = "0.1.0"
__all__ = ["drag", "geometry", "hue", "segments", "selection", "settings", "view"]