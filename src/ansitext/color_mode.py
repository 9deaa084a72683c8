"""Color mode configuration for the ansitext command line."""

import os
import sys
from enum import StrEnum, auto

ANSITEXT_COLOR = "ANSITEXT_COLOR"


class ColorMode(StrEnum):
    """Whether formatted output keeps its escape sequences."""

    ALWAYS = auto()
    NEVER = auto()


class ColorOption(StrEnum):
    """Color mode option, as given on the command line."""

    AUTO = auto()
    ALWAYS = auto()
    NEVER = auto()


def detect_color_mode(cli_option: ColorOption) -> ColorMode:
    """Detect color mode based on priority order.

    Priority:
    1. CLI option if not "auto"
    2. ANSITEXT_COLOR environment variable
    3. NO_COLOR environment variable (if defined and not empty)
    4. FORCE_COLOR environment variable (if defined and not empty)
    5. Whether stdout is a terminal
    """
    if cli_option != ColorOption.AUTO:
        return ColorMode(cli_option.value)

    if env_mode := os.getenv(ANSITEXT_COLOR):
        try:
            return ColorMode(env_mode.lower())
        except ValueError:
            pass

    if os.getenv("NO_COLOR"):
        return ColorMode.NEVER

    if os.getenv("FORCE_COLOR"):
        return ColorMode.ALWAYS

    return ColorMode.ALWAYS if _stdout_is_terminal() else ColorMode.NEVER


def _stdout_is_terminal() -> bool:
    return sys.stdout.isatty()
