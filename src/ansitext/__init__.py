"""Ansitext, stylish ANSI terminal text.

Formatters wrap SGR codes and nest freely:

    from ansitext import bold, green, red

    print(red("Error in", bold(green("setup.py")), "at line", 12))

Formatted values are converted to text with str() or render().
"""

from ansitext.formatter import FormattedString, Formatter, combine, sgr
from ansitext.palette import (
    InvalidColorError,
    custom_color,
    custom_color_bg,
    rgb_to_xterm,
)
from ansitext.styles import (
    STYLES,
    UnknownStyleError,
    black,
    black_bg,
    blink,
    blue,
    blue_bg,
    bold,
    combine_styles,
    cyan,
    cyan_bg,
    default_color,
    default_color_bg,
    get_style,
    green,
    green_bg,
    magenta,
    magenta_bg,
    no_blink,
    no_bold,
    no_formatting,
    no_underline,
    red,
    red_bg,
    underline,
    white,
    white_bg,
    yellow,
    yellow_bg,
)

__version__ = "0.1.0"

__all__ = [
    "STYLES",
    "FormattedString",
    "Formatter",
    "InvalidColorError",
    "UnknownStyleError",
    "black",
    "black_bg",
    "blink",
    "blue",
    "blue_bg",
    "bold",
    "combine",
    "combine_styles",
    "custom_color",
    "custom_color_bg",
    "cyan",
    "cyan_bg",
    "default_color",
    "default_color_bg",
    "get_style",
    "green",
    "green_bg",
    "magenta",
    "magenta_bg",
    "no_blink",
    "no_bold",
    "no_formatting",
    "no_underline",
    "red",
    "red_bg",
    "rgb_to_xterm",
    "sgr",
    "underline",
    "white",
    "white_bg",
    "yellow",
    "yellow_bg",
]
