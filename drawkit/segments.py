"""Families of trigonometric curves drawn as connected line segments."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List

from drawkit.geometry import Point2d

FREQUENCY_MINIMUM = 1.0 / 32.0
FREQUENCY_MAXIMUM = 32.0
AMPLITUDE_MAXIMUM = 1000.0
INITIAL_FUNCTION_COUNT = 4
ZERO_LINE = 1080.0 / 2.0


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be within [{low}, {high}], got {value!r}")


@dataclass(frozen=True)
class TrigSettings:
    """One curve: amplitude, frequency, phase in degrees and stroke hue."""

    amplitude: float = 400.0
    frequency: float = 1.0
    phase: float = 0.0
    hue: float = 0.0

    def __post_init__(self) -> None:
        _check_range("amplitude", self.amplitude, 0.0, AMPLITUDE_MAXIMUM)
        _check_range(
            "frequency", self.frequency, FREQUENCY_MINIMUM, FREQUENCY_MAXIMUM
        )
        _check_range("phase", self.phase, -180.0, 180.0)


@dataclass(frozen=True)
class SegmentSettings:
    """How many curves to make and how their frequencies are spread."""

    function_count: int = INITIAL_FUNCTION_COUNT
    point_count: int = 256
    start_frequency: float = 1.0
    end_frequency: float = 4.0
    amplitude: float = 200.0
    is_logarithmic: bool = True

    def __post_init__(self) -> None:
        _check_range("function_count", self.function_count, 2, 32)
        _check_range("point_count", self.point_count, 2, 2048)
        _check_range(
            "start_frequency",
            self.start_frequency,
            FREQUENCY_MINIMUM,
            FREQUENCY_MAXIMUM,
        )
        _check_range(
            "end_frequency",
            self.end_frequency,
            FREQUENCY_MINIMUM,
            FREQUENCY_MAXIMUM,
        )
        _check_range("amplitude", self.amplitude, 0.0, AMPLITUDE_MAXIMUM)


def get_fundamental(frequency: float) -> float:
    """Fold a frequency down (or up) by octaves into [1, 2)."""
    positive = abs(frequency)
    if positive <= 0.0:
        raise ValueError("frequency must not be zero")
    octave = math.floor(math.log2(positive))
    return positive / math.pow(2.0, octave)


def get_hue(frequency: float) -> float:
    """Hue in degrees for a frequency; octaves of a note share a hue."""
    fundamental = max(1.0, get_fundamental(frequency))
    return 360.0 * (fundamental - 1.0)


def _check_count(count: int) -> None:
    if count < 2:
        raise ValueError(f"count must be at least 2, got {count!r}")


def linear_frequencies(start: float, end: float, count: int) -> List[float]:
    """``count`` frequencies evenly spaced from ``start`` towards ``end``."""
    _check_count(count)
    step = (end - start) / (count - 1)
    frequencies = []
    frequency = start
    for _ in range(count):
        frequencies.append(frequency)
        frequency += step
    return frequencies


def logarithmic_frequencies(start: float, end: float, count: int) -> List[float]:
    """``count`` frequencies with a constant ratio from ``start`` to ``end``."""
    _check_count(count)
    factor = math.pow(end / start, 1.0 / (count - 1))
    frequencies = []
    frequency = start
    for _ in range(count):
        frequencies.append(frequency)
        frequency *= factor
    return frequencies


def make_functions(settings: SegmentSettings) -> List[TrigSettings]:
    """Build the curves described by ``settings``, with zero phase."""
    spread = (
        logarithmic_frequencies
        if settings.is_logarithmic
        else linear_frequencies
    )
    frequencies = spread(
        settings.start_frequency, settings.end_frequency, settings.function_count
    )
    return [
        TrigSettings(
            amplitude=settings.amplitude,
            frequency=frequency,
            phase=0.0,
            hue=get_hue(frequency),
        )
        for frequency in frequencies
    ]


def make_trig_points(
    point_count: int,
    trig: TrigSettings,
    image_width: float,
    function: Callable[[float], float] = math.sin,
) -> List[Point2d]:
    """Sample one period of ``function`` across the width of the image.

    The curve is centred on a fixed zero line, with positive values drawn
    upwards.
    """
    if point_count < 2:
        raise ValueError(f"point_count must be at least 2, got {point_count!r}")
    last = point_count - 1
    spacing = float(image_width) / last
    phase = math.radians(trig.phase)
    points = []
    for i in range(point_count):
        x = math.tau if i == last else i * math.tau / last
        y = trig.amplitude * function(trig.frequency * x + phase)
        points.append(Point2d(i * spacing, ZERO_LINE - y))
    return points