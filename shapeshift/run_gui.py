import logging
import math
import os
import random

from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QScrollArea, QWidget

from shapeshift.utils.settings import get_default_configuration
from shapeshift.widgets.qt_geometry import (ResizeNotifier, WidgetGeometryProvider,
                                            WidgetPlacementSink)
from shapeshift.widgets.shapeshift import Shapeshift

TILE_WIDTH = 120
TILE_COUNT = 40


def configure_logging():
    """Verbose flow logs in development, warnings only otherwise."""
    environment = os.getenv('SHAPESHIFT_ENVIRONMENT')
    if environment == 'development':
        print('Running in development environment.')
        logging.basicConfig(level=logging.DEBUG)
        return
    logging.basicConfig(level=logging.WARNING)


def fit_container_height(container):
    """Callback resizing the scrollable container to the packed height."""
    def on_layout(layout):
        container.setMinimumHeight(int(math.ceil(layout.total_height)))
    return on_layout


def build_demo_tiles(container, count=TILE_COUNT, seed=None):
    rng = random.Random(seed)
    for n in range(count):
        tile = QLabel(str(n), container)
        hue = rng.randrange(360)
        tile.setStyleSheet(f'background-color: hsl({hue}, 60%, 70%); border-radius: 4px;')
        tile.setFixedSize(TILE_WIDTH, rng.randrange(60, 240))


def run_gui():
    configure_logging()
    app = QApplication([])
    app.setApplicationName('Shapeshift')
    app.setApplicationDisplayName('Shapeshift')
    app.setStyle('Fusion')

    main_window = QMainWindow()
    scroll_area = QScrollArea(main_window)
    scroll_area.setWidgetResizable(True)
    container = QWidget()
    build_demo_tiles(container)
    scroll_area.setWidget(container)
    main_window.setCentralWidget(scroll_area)
    main_window.resize(800, 600)

    notifier = ResizeNotifier(container)
    layout = Shapeshift(container, WidgetGeometryProvider(), WidgetPlacementSink(),
                        notifier=notifier, on_layout=fit_container_height(container))
    layout.initialize(get_default_configuration())
    app.aboutToQuit.connect(layout.destroy)

    main_window.show()
    app.exec()


if __name__ == '__main__':
    run_gui()
