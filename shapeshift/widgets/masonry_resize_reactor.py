from enum import Enum

from shapeshift.models.layout_errors import ConfigurationError
from shapeshift.models.layout_item import is_valid_measurement
from shapeshift.utils.flow_log import log_flow
from shapeshift.widgets.masonry_columns import compute_column_count
from shapeshift.widgets.masonry_context import LayoutState


class ReactorState(Enum):
    UNINITIALIZED = 'uninitialized'
    STABLE = 'stable'


class ResizeReactor:
    """Repacks the layout when a container resize changes the column count."""

    def __init__(self, layout: LayoutState, geometry, container, relayout):
        """
        Args:
            layout: State shared with the owning Shapeshift instance
            geometry: Provider of container width measurements
            container: Container handle passed to the provider
            relayout: Zero-argument callable running a full pack + render
        """
        self._layout = layout
        self._geometry = geometry
        self._container = container
        self._relayout = relayout
        self._state = ReactorState.UNINITIALIZED
        self._layout_in_progress = False
        self._resize_pending = False
        self._relayout_pending = False

    @property
    def state(self) -> ReactorState:
        return self._state

    @property
    def layout_in_progress(self) -> bool:
        return self._layout_in_progress

    def start(self):
        """Measure once, size the columns and run the first layout pass."""
        width = self._geometry.measure_container_width(self._container)
        if not is_valid_measurement(width):
            raise ConfigurationError(f"Container width unavailable: {width!r}")
        self._layout.container_width = width
        self._layout.column_model.reset(self._column_count_for(width))
        self._state = ReactorState.STABLE
        log_flow("RESIZE", f"Stable at width={width} columns={self._layout.column_count}")
        self.relayout()

    def stop(self):
        self._state = ReactorState.UNINITIALIZED
        self._resize_pending = False
        self._relayout_pending = False

    def on_resize(self):
        """Handle a 'width may have changed' notification."""
        if self._state is not ReactorState.STABLE:
            log_flow("RESIZE", "Resize ignored; reactor not started")
            return
        if self._layout_in_progress:
            self._resize_pending = True
            return

        width = self._geometry.measure_container_width(self._container)
        if not is_valid_measurement(width):
            log_flow("RESIZE", f"Ignoring unusable container width {width!r}", level="WARNING")
            return
        if width == self._layout.container_width:
            return

        self._layout.container_width = width
        column_count = self._column_count_for(width)
        if column_count == self._layout.column_count:
            log_flow("RESIZE", f"Width {width} keeps {column_count} columns",
                     throttle_key="resize_same_columns", every_s=0.5)
            return

        log_flow("RESIZE", f"Columns {self._layout.column_count} -> {column_count} at width={width}")
        self._layout.column_model.reset(column_count)
        self.relayout()

    def relayout(self):
        """Run one full layout pass, never overlapping another one."""
        if self._layout_in_progress:
            self._relayout_pending = True
            return

        self._layout_in_progress = True
        try:
            self._relayout()
        finally:
            self._layout_in_progress = False

        if self._relayout_pending:
            self._relayout_pending = False
            self.relayout()
        if self._resize_pending:
            self._resize_pending = False
            self.on_resize()

    def _column_count_for(self, width) -> int:
        if not self._layout.items:
            return 0
        return compute_column_count(width, self._layout.item_width,
                                    self._layout.configuration.gutter_x)
