"""Positionable unit of a masonry layout."""

import math
import numbers
from dataclasses import dataclass


def is_valid_measurement(value) -> bool:
    """Return True for finite, non-negative numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value) and value >= 0


@dataclass
class LayoutItem:
    """One registered item; `x` and `y` are written by the layout engine."""
    index: int
    element: object
    width: float
    height: float
    x: float = 0
    y: float = 0

    @property
    def measurable(self) -> bool:
        return is_valid_measurement(self.width) and is_valid_measurement(self.height)
