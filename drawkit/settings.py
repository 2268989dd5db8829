"""Plain settings values: colours, selection nodes, waveforms and zoom scale."""

from __future__ import annotations

from dataclasses import dataclass, field

SCALE_MINIMUM = 0.25
SCALE_MAXIMUM = 16.0
_SCALE_WIDTH = 5
_SCALE_PRECISION = 3


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be within [{low}, {high}], got {value!r}")


@dataclass(frozen=True)
class Hsv:
    """A colour given as hue in degrees, saturation and value."""

    hue: float = 0.0
    saturation: float = 0.0
    value: float = 0.0


DARK_GREEN = Hsv(136.0, 0.57, 0.36)


@dataclass(frozen=True)
class BrightnessRange:
    """A pair of linked brightness limits within [0, 1], low never above high."""

    low: float = 0.2
    high: float = 0.9

    def __post_init__(self) -> None:
        _check_range("low", self.low, 0.0, 1.0)
        _check_range("high", self.high, 0.0, 1.0)
        if self.low > self.high:
            raise ValueError(
                f"low ({self.low!r}) must not exceed high ({self.high!r})"
            )


@dataclass(frozen=True)
class NodeSettings:
    """Selection state of a node and the colour used to highlight it."""

    is_selected: bool = False
    highlight_color: Hsv = DARK_GREEN


@dataclass(frozen=True)
class WaveformColor:
    """Colouring of a waveform display."""

    DEFAULT_COUNT = 20
    DEFAULT_HUE = 138.0  # green
    DEFAULT_HIGHLIGHT_HUE = 292.0  # purple

    range: BrightnessRange = field(default_factory=BrightnessRange)
    count: int = DEFAULT_COUNT
    color: Hsv = Hsv(DEFAULT_HUE, 1.0, 1.0)
    highlight_color: Hsv = Hsv(DEFAULT_HIGHLIGHT_HUE, 1.0, 1.0)

    def __post_init__(self) -> None:
        _check_range("count", self.count, 1, 64)


@dataclass(frozen=True)
class WaveformSettings:
    """Parameters of a waveform display."""

    DEFAULT_MAXIMUM_VALUE = 255
    DEFAULT_LEVEL_COUNT = 256
    DEFAULT_COLUMN_COUNT = 400
    DEFAULT_VERTICAL_ZOOM = 1.0

    enable: bool = True
    maximum_value: int = DEFAULT_MAXIMUM_VALUE
    level_count: int = DEFAULT_LEVEL_COUNT
    column_count: int = DEFAULT_COLUMN_COUNT
    vertical_scale: float = DEFAULT_VERTICAL_ZOOM
    color: WaveformColor = field(default_factory=WaveformColor)

    def __post_init__(self) -> None:
        if self.maximum_value < 0:
            raise ValueError(
                f"maximum_value must not be negative, got {self.maximum_value!r}"
            )
        _check_range("level_count", self.level_count, 1, 1024)
        _check_range("column_count", self.column_count, 1, 1920)
        _check_range("vertical_scale", self.vertical_scale, 1.0, 10.0)


def format_scale(value: float) -> str:
    """Format a zoom factor for display, such as ``2.000x``."""
    return f"{value:{_SCALE_WIDTH}.{_SCALE_PRECISION}f}x"


def constrain_scale(value: float) -> float:
    """Clamp a zoom factor to the supported range of 0.25x to 16x."""
    return min(max(float(value), SCALE_MINIMUM), SCALE_MAXIMUM)