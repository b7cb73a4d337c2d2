"""Public surface for attaching a masonry layout to a container."""

import random
import string
from enum import Enum

from shapeshift.models.layout_configuration import LayoutConfiguration
from shapeshift.models.layout_errors import MeasurementUnavailable, UnknownCommandError
from shapeshift.models.layout_item import LayoutItem, is_valid_measurement
from shapeshift.utils.flow_log import log_flow
from shapeshift.widgets.masonry_context import LayoutState
from shapeshift.widgets.masonry_layout import pack, render
from shapeshift.widgets.masonry_resize_reactor import ReactorState, ResizeReactor

_IDENTIFIER_ALPHABET = string.digits + string.ascii_lowercase


def _make_identifier() -> str:
    return 'ss-' + ''.join(random.choices(_IDENTIFIER_ALPHABET, k=6))


class ShapeshiftCommand(Enum):
    UPDATE = 'update'
    DESTROY = 'destroy'


class Shapeshift:
    """
    Masonry layout bound to one container.

    Collaborators are duck-typed:
        geometry: children(container), measure_container_width(container),
            measure_item_width(element), measure_item_height(element)
        sink: place(element, x, y)
        notifier: subscribe(container, callback), unsubscribe()
        on_layout: called with the instance after every pack + render pass
    """

    def __init__(self, container, geometry, sink, notifier=None, options=None,
                 on_layout=None):
        self._container = container
        self._geometry = geometry
        self._sink = sink
        self._notifier = notifier
        self._options = options
        self._on_layout = on_layout
        self._identifier = _make_identifier()
        self._layout = LayoutState()
        self._reactor = None
        self._destroyed = False

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def configuration(self) -> LayoutConfiguration:
        return self._layout.configuration

    @property
    def items(self) -> list[LayoutItem]:
        return list(self._layout.items)

    @property
    def column_count(self) -> int:
        return self._layout.column_count

    @property
    def column_heights(self) -> list:
        return self._layout.column_model.heights

    @property
    def container_width(self):
        return self._layout.container_width

    @property
    def item_width(self):
        return self._layout.item_width

    @property
    def total_height(self):
        return self._layout.column_model.total_height()

    @property
    def state(self) -> ReactorState:
        if self._reactor is None:
            return ReactorState.UNINITIALIZED
        return self._reactor.state

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def initialize(self, configuration: LayoutConfiguration | None = None):
        """Register children, subscribe to resizes and run the first pass."""
        if self._reactor is not None:
            log_flow("SHAPESHIFT", f"{self._identifier} already initialized")
            return self
        if configuration is None:
            configuration = LayoutConfiguration.from_options(self._options)

        self._destroyed = False
        self._layout = LayoutState(configuration=configuration)
        self._parse_children()
        self._reactor = ResizeReactor(self._layout, self._geometry, self._container,
                                      self._pack_and_render)
        if self._notifier is not None:
            self._notifier.subscribe(self._container, self._reactor.on_resize)
        try:
            self._reactor.start()
        except Exception:
            self._teardown()
            raise
        log_flow("SHAPESHIFT", f"{self._identifier} initialized with {len(self._layout.items)} items, "
                               f"{self._layout.column_count} columns")
        return self

    def update(self):
        """Repack and render every item, whether or not the columns changed."""
        if self._reactor is None or self._reactor.state is not ReactorState.STABLE:
            log_flow("SHAPESHIFT", f"{self._identifier} update ignored; not initialized")
            return
        self._reactor.relayout()

    def on_resize(self):
        if self._reactor is not None:
            self._reactor.on_resize()

    def destroy(self):
        """Unsubscribe and release the items. Safe to call more than once."""
        if self._destroyed:
            return
        self._teardown()
        self._destroyed = True
        if _instances.get(self._container) is self:
            _instances.pop(self._container)
        log_flow("SHAPESHIFT", f"{self._identifier} destroyed")

    def run_command(self, command: 'ShapeshiftCommand | str'):
        command = _parse_command(command)
        if command is ShapeshiftCommand.UPDATE:
            self.update()
        elif command is ShapeshiftCommand.DESTROY:
            self.destroy()

    def _teardown(self):
        if self._notifier is not None:
            self._notifier.unsubscribe()
        if self._reactor is not None:
            self._reactor.stop()
        self._reactor = None
        self._layout.items.clear()
        self._layout.packed = []

    def _parse_children(self):
        self._layout.items = []
        for index, element in enumerate(self._geometry.children(self._container)):
            try:
                self._layout.items.append(self._measure_child(element, index))
            except MeasurementUnavailable as e:
                log_flow("SHAPESHIFT", f"Not registering child: {e}", level="WARNING")

        # All items share the first item's width.
        self._layout.item_width = self._layout.items[0].width if self._layout.items else 0

    def _measure_child(self, element, index: int) -> LayoutItem:
        width = self._geometry.measure_item_width(element)
        if not is_valid_measurement(width):
            raise MeasurementUnavailable(index, 'width', width)
        height = self._geometry.measure_item_height(element)
        if not is_valid_measurement(height):
            raise MeasurementUnavailable(index, 'height', height)
        return LayoutItem(index=index, element=element, width=width, height=height)

    def _pack_and_render(self):
        self._layout.column_model.zero()
        configuration = self._layout.configuration
        self._layout.packed = pack(self._layout.items, self._layout.column_model,
                                   configuration.gutter_x, configuration.gutter_y)
        render(self._layout.packed, self._sink)
        if self._on_layout is not None:
            self._on_layout(self)


def _parse_command(command) -> ShapeshiftCommand:
    if isinstance(command, ShapeshiftCommand):
        return command
    if not isinstance(command, str) or command.startswith('_') or command == 'init':
        raise UnknownCommandError(f"Not a public command: {command!r}")
    try:
        return ShapeshiftCommand(command)
    except ValueError as e:
        raise UnknownCommandError(f"Not a public command: {command!r}") from e


# One instance per container, like per-element plugin data.
_instances: dict = {}


def attach(container, geometry, sink, notifier=None, options=None) -> Shapeshift:
    """Return the container's instance, creating and initializing it if needed."""
    instance = _instances.get(container)
    if instance is None:
        instance = Shapeshift(container, geometry, sink, notifier=notifier, options=options)
        instance.initialize()
        _instances[container] = instance
    return instance


def get_instance(container) -> Shapeshift | None:
    return _instances.get(container)


def call(container, command):
    """Run a public command on the container's instance, if it has one."""
    command = _parse_command(command)
    instance = _instances.get(container)
    if instance is None:
        log_flow("SHAPESHIFT", f"No instance attached for {command.value}")
        return None
    instance.run_command(command)
    if command is ShapeshiftCommand.DESTROY:
        _instances.pop(container, None)
    return instance
