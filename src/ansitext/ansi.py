"""ANSI escape code constants."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

# CSI - Control Sequence Introducer, \033 is octal for ESC (0x1b)
CSI = "\033["
SGR_SEPARATOR = ";"
SGR_TERMINATOR = "m"
SGR_RESET = "0"

RESET = CSI + SGR_RESET + SGR_TERMINATOR


def sgr_sequence(codes: Iterable[str]) -> str:
    """Build a Select Graphic Rendition escape sequence.

    The parameters are joined in order, without deduplication, since later
    codes override earlier ones: sgr_sequence(["1", "31"]) == "\\x1b[1;31m".
    """
    return CSI + SGR_SEPARATOR.join(codes) + SGR_TERMINATOR
