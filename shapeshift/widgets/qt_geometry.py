"""PySide6 measurement, placement and resize notification for Shapeshift."""

from PySide6.QtCore import QEvent, QObject


class WidgetGeometryProvider:
    """Measures a container widget and its direct child widgets."""

    def children(self, container):
        return [child for child in container.children() if child.isWidgetType()]

    def measure_container_width(self, container):
        return container.width()

    def measure_item_width(self, element):
        return element.width()

    def measure_item_height(self, element):
        return element.height()


class WidgetPlacementSink:
    """Moves child widgets, snapping coordinates to whole pixels."""

    def place(self, element, x, y):
        element.move(int(round(x)), int(round(y)))


class ResizeNotifier(QObject):
    """Calls back whenever the watched widget receives a resize event."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._watched = None
        self._callback = None

    def subscribe(self, widget, callback):
        self.unsubscribe()
        self._watched = widget
        self._callback = callback
        widget.installEventFilter(self)

    def unsubscribe(self):
        if self._watched is not None:
            self._watched.removeEventFilter(self)
        self._watched = None
        self._callback = None

    def eventFilter(self, watched, event):
        if (watched is self._watched and self._callback is not None
                and event.type() == QEvent.Type.Resize):
            self._callback()
        return False
