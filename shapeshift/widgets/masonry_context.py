from dataclasses import dataclass, field

from shapeshift.models.layout_configuration import LayoutConfiguration
from shapeshift.widgets.masonry_columns import ColumnModel


@dataclass
class LayoutState:
    """Mutable state owned by a single Shapeshift instance."""

    configuration: LayoutConfiguration = field(default_factory=LayoutConfiguration)
    column_model: ColumnModel = field(default_factory=ColumnModel)
    items: list = field(default_factory=list)
    container_width: float | None = None
    item_width: float = 0
    packed: list = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return self.column_model.column_count
