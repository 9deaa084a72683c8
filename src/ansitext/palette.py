"""Quantize RGB colors to the xterm 256-color palette.

Indices 16-231 of the palette form a 6x6x6 color cube. Each channel, given as
a float from 0 to 1, is scaled to 0-5 and rounded half up.
"""

from ansitext.formatter import Formatter

FOREGROUND_PREFIX = "38;5;"
BACKGROUND_PREFIX = "48;5;"

CUBE_OFFSET = 16
CUBE_LEVELS = 5


class InvalidColorError(ValueError):
    """RGB channel outside of the [0, 1] range, or unparsable color."""

    def __init__(self, channel: str, value: object) -> None:
        """Record the offending channel and value."""
        super().__init__(
            f"Invalid {channel} value {value!r}: channels must be from 0 to 1"
        )
        self.channel = channel
        self.value = value


def _cube_level(channel: str, value: float) -> int:
    # NaN fails the comparison as well
    if not 0.0 <= value <= 1.0:
        raise InvalidColorError(channel, value)
    return int(value * CUBE_LEVELS + 0.5)


def rgb_to_xterm(red: float, green: float, blue: float) -> int:
    """Convert RGB coordinates to an xterm 256-color palette index.

    Raises:
        InvalidColorError: If a channel is not within [0, 1].
    """
    r = _cube_level("red", red)
    g = _cube_level("green", green)
    b = _cube_level("blue", blue)
    return CUBE_OFFSET + r * 36 + g * 6 + b


def custom_color(red: float, green: float, blue: float) -> Formatter:
    """Foreground formatter for the palette color nearest to RGB."""
    index = rgb_to_xterm(red, green, blue)
    return Formatter((f"{FOREGROUND_PREFIX}{index}",))


def custom_color_bg(red: float, green: float, blue: float) -> Formatter:
    """Background formatter for the palette color nearest to RGB."""
    index = rgb_to_xterm(red, green, blue)
    return Formatter((f"{BACKGROUND_PREFIX}{index}",))


def parse_rgb(text: str) -> tuple[float, float, float]:
    """Parse a color given as "R,G,B", with channels from 0 to 1."""
    try:
        red, green, blue = (float(x) for x in text.split(","))
    except ValueError as error:
        raise InvalidColorError("rgb", text) from error
    return red, green, blue
