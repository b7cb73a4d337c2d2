from dataclasses import dataclass

from shapeshift.models.layout_errors import ConfigurationError
from shapeshift.models.layout_item import is_valid_measurement
from shapeshift.utils.flow_log import log_flow

DEFAULT_GUTTER_X = 20
DEFAULT_GUTTER_Y = 10


@dataclass(frozen=True)
class LayoutConfiguration:
    """Per-instance spacing, fixed at initialization."""
    gutter_x: float = DEFAULT_GUTTER_X
    gutter_y: float = DEFAULT_GUTTER_Y

    def __post_init__(self):
        for name in ('gutter_x', 'gutter_y'):
            value = getattr(self, name)
            if not is_valid_measurement(value):
                raise ConfigurationError(f"{name} must be a number >= 0, got {value!r}")

    @classmethod
    def from_options(cls, options=None, defaults: 'LayoutConfiguration | None' = None):
        """
        Build a configuration from a `{'gutter': [x, y]}` options mapping.

        Options are merged over `defaults`; unknown keys are ignored.
        """
        defaults = defaults or cls()
        if not options:
            return defaults
        unknown = sorted(key for key in options if key != 'gutter')
        if unknown:
            log_flow("SHAPESHIFT", f"Ignoring unknown options: {', '.join(map(str, unknown))}")
        gutter = options.get('gutter')
        if gutter is None:
            return defaults
        if isinstance(gutter, (str, bytes)):
            raise ConfigurationError(f"gutter must be a pair of numbers, got {gutter!r}")
        try:
            gutter_x, gutter_y = gutter
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"gutter must be a pair of numbers, got {gutter!r}") from e
        return cls(gutter_x=gutter_x, gutter_y=gutter_y)
