"""Column count derivation and per-column height bookkeeping."""

import math

from shapeshift.models.layout_errors import ConfigurationError
from shapeshift.utils.flow_log import log_flow


def compute_column_count(container_width: float, item_width: float, gutter_x: float) -> int:
    """
    Calculate how many columns fit into the container.

    One gutter is added to the container width so that N columns with
    N - 1 interior gutters fit exactly when the width equals
    N * item_width + (N - 1) * gutter_x.

    Raises:
        ConfigurationError: if item_width + gutter_x is not positive
    """
    adjusted_col_width = item_width + gutter_x
    if adjusted_col_width <= 0:
        raise ConfigurationError(
            f"Cannot compute columns: item width {item_width!r} + gutter {gutter_x!r} <= 0")
    available_width = container_width + gutter_x
    if available_width <= 0:
        return 0
    return int(math.floor(available_width / adjusted_col_width))


def fit_min_index(heights) -> int:
    """Index of the first minimum value, or -1 when there is none."""
    if not heights:
        return -1
    return min(range(len(heights)), key=lambda i: heights[i])


class ColumnModel:
    """Accumulated height of every column."""

    def __init__(self, column_count: int = 0):
        self._heights = []
        self.reset(column_count)

    @property
    def column_count(self) -> int:
        return len(self._heights)

    @property
    def heights(self) -> list:
        return self._heights

    def reset(self, column_count: int):
        """Replace the heights with `column_count` zeroed columns."""
        if column_count < 0:
            raise ValueError(f"column_count must be >= 0, got {column_count}")
        self._heights = [0] * column_count
        log_flow("COLUMNS", f"Reset to {column_count} columns")

    def zero(self):
        """Zero every column in place before a full repack."""
        for i in range(len(self._heights)):
            self._heights[i] = 0

    def shortest_column(self) -> int:
        # First occurrence wins on ties.
        return fit_min_index(self._heights)

    def add(self, column: int, amount: float):
        self._heights[column] += amount

    def total_height(self) -> float:
        return max(self._heights) if self._heights else 0
