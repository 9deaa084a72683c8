"""Named formatters for the standard SGR attributes."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from ansitext.ansi import SGR_RESET
from ansitext.formatter import Formatter, combine, sgr

if TYPE_CHECKING:
    from collections.abc import Iterable


class UnknownStyleError(KeyError):
    """Style name not found in the style registry."""


default_color = sgr("39")
black = sgr("30")
red = sgr("31")
green = sgr("32")
yellow = sgr("33")
blue = sgr("34")
magenta = sgr("35")
cyan = sgr("36")
white = sgr("37")

default_color_bg = sgr("49")
black_bg = sgr("40")
red_bg = sgr("41")
green_bg = sgr("42")
yellow_bg = sgr("43")
blue_bg = sgr("44")
magenta_bg = sgr("45")
cyan_bg = sgr("46")
white_bg = sgr("47")

bold = sgr("1")
no_bold = sgr("22")

blink = sgr("5")
no_blink = sgr("25")

underline = sgr("4")
no_underline = sgr("24")

no_formatting = sgr(SGR_RESET)

STYLES: dict[str, Formatter] = {
    "default_color": default_color,
    "black": black,
    "red": red,
    "green": green,
    "yellow": yellow,
    "blue": blue,
    "magenta": magenta,
    "cyan": cyan,
    "white": white,
    "default_color_bg": default_color_bg,
    "black_bg": black_bg,
    "red_bg": red_bg,
    "green_bg": green_bg,
    "yellow_bg": yellow_bg,
    "blue_bg": blue_bg,
    "magenta_bg": magenta_bg,
    "cyan_bg": cyan_bg,
    "white_bg": white_bg,
    "bold": bold,
    "no_bold": no_bold,
    "blink": blink,
    "no_blink": no_blink,
    "underline": underline,
    "no_underline": no_underline,
    "no_formatting": no_formatting,
}


def get_style(name: str) -> Formatter:
    """Look up a named style, accepting "-" for "_" and any letter case."""
    key = name.strip().lower().replace("-", "_")
    try:
        return STYLES[key]
    except KeyError:
        raise UnknownStyleError(name) from None


def combine_styles(names: Iterable[str]) -> Formatter:
    """Combine named styles into one formatter, in order."""
    formatters = [get_style(name) for name in names]
    if not formatters:
        msg = "No style names given"
        raise ValueError(msg)
    return functools.reduce(combine, formatters)
