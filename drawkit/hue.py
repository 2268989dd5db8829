"""Random hues for colouring newly created shapes."""

from __future__ import annotations

import random
import time
from typing import Optional


def now_as_seconds() -> int:
    """Whole seconds since the epoch."""
    return int(time.time())


class HueGenerator:
    """Produces hues uniformly distributed over [0, 360)."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._generator = random.Random(now_as_seconds() if seed is None else seed)

    def make_hue(self) -> float:
        return self._generator.random() * 360.0