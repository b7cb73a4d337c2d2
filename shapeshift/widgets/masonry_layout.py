"""Greedy shortest-column packing for equal-width items."""

from shapeshift.models.layout_item import LayoutItem
from shapeshift.utils.flow_log import log_flow
from shapeshift.widgets.masonry_columns import ColumnModel, fit_min_index

__all__ = ['fit_min_index', 'pack', 'render']


def pack(items: list[LayoutItem], column_model: ColumnModel,
         gutter_x: float, gutter_y: float) -> list[LayoutItem]:
    """
    Calculate and assign the position of every item.

    Items are visited in registration order and each one goes into the
    column with the least accumulated height. Items with unusable
    measurements keep their old coordinates and are left out of the
    result.

    Args:
        items: Registered items
        column_model: Column heights, mutated in place
        gutter_x: Horizontal gutter between columns
        gutter_y: Vertical gutter added below every item

    Returns:
        The items that received a position, in packing order
    """
    ordered = sorted(items, key=lambda item: item.index)
    if ordered and column_model.column_count == 0:
        log_flow("PACK", f"No columns available; {len(ordered)} items left unplaced",
                 level="WARNING")
        return []

    packed = []
    for item in ordered:
        if not item.measurable:
            log_flow("PACK", f"Skipping item {item.index}: size {item.width!r}x{item.height!r}",
                     level="WARNING")
            continue

        column = column_model.shortest_column()
        padding_offset = column * gutter_x

        item.y = column_model.heights[column]
        item.x = (column * item.width) + padding_offset

        column_model.add(column, item.height + gutter_y)
        packed.append(item)

    log_flow("PACK", f"Packed {len(packed)}/{len(ordered)} items into "
                     f"{column_model.column_count} columns")
    return packed


def render(items: list[LayoutItem], sink):
    """Hand every item's coordinates to the placement sink unchanged."""
    for item in items:
        sink.place(item.element, item.x, item.y)
