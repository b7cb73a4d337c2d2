from PySide6.QtCore import QSettings, Signal

from shapeshift.models.layout_configuration import (DEFAULT_GUTTER_X,
                                                    DEFAULT_GUTTER_Y,
                                                    LayoutConfiguration)

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    'gutter_x': DEFAULT_GUTTER_X,  # Horizontal space between columns
    'gutter_y': DEFAULT_GUTTER_Y,  # Vertical space below every item
}


class Settings(QSettings):
    # Signal that shows that the setting with the given string was changes
    change = Signal(str, object, name='settingsChanged')

    def __init__(self):
        super().__init__('shapeshift', 'shapeshift')

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()


def get_default_configuration(source=None) -> LayoutConfiguration:
    """Gutters stored in the settings, validated."""
    source = source if source is not None else settings
    gutter_x = source.value('gutter_x', defaultValue=DEFAULT_SETTINGS['gutter_x'],
                            type=float)
    gutter_y = source.value('gutter_y', defaultValue=DEFAULT_SETTINGS['gutter_y'],
                            type=float)
    return LayoutConfiguration(gutter_x=gutter_x, gutter_y=gutter_y)
