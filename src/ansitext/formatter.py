"""Nestable ANSI formatters.

A Formatter wraps one or more SGR codes. Calling it on some arguments returns
a FormattedString, which keeps every argument as a separate part so that an
enclosing formatter can prefix its own code onto each part:

    red(green("A", "B"), "C")

Here red receives "A" and "B" as two parts relayed from green, instead of a
single opaque "AB", and the rendered text restores the default terminal state
after each of the three parts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ansitext.ansi import RESET, sgr_sequence

if TYPE_CHECKING:
    from collections.abc import Iterable

# Decimal parameters, a single code may hold several such as "38;5;196"
SGR_CODE_REGEX = re.compile(r"[0-9]+(?:;[0-9]+)*")


@dataclass(frozen=True)
class FormattedString:
    """Escaped text parts relayed between nested formatters.

    Parts carry their SGR prefixes but no trailing reset, however many
    formatters they passed through. render() appends one reset per part.
    """

    parts: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))

    def render(self) -> str:
        """Concatenate the parts, resetting terminal state after each one."""
        return "".join(part + RESET for part in self.parts)

    def __str__(self) -> str:
        return self.render()

    def __add__(self, other: object) -> FormattedString:
        if not isinstance(other, FormattedString):
            return NotImplemented
        return FormattedString(self.parts + other.parts)


@dataclass(frozen=True)
class Formatter:
    """Apply a fixed set of SGR codes to text, with nesting semantics."""

    codes: tuple[str, ...]

    def __post_init__(self) -> None:
        codes = self.codes
        if isinstance(codes, str):
            codes = (codes,)
        object.__setattr__(self, "codes", tuple(codes))
        if not self.codes:
            msg = "Formatter requires at least one SGR code"
            raise ValueError(msg)
        for code in self.codes:
            if not isinstance(code, str):
                msg = f"SGR code must be a str, not {type(code).__name__}"
                raise TypeError(msg)
            if not SGR_CODE_REGEX.fullmatch(code):
                msg = f"Invalid SGR code {code!r}"
                raise ValueError(msg)

    @property
    def sequence(self) -> str:
        """Escape sequence prefixed onto every formatted part."""
        return sgr_sequence(self.codes)

    def apply(self, args: Iterable[object]) -> FormattedString:
        """Format each argument separately.

        A FormattedString argument contributes one part per relayed part, all
        other values are converted with str() and contribute a single part.
        """
        prefix = self.sequence
        parts: list[str] = []
        for arg in args:
            if isinstance(arg, FormattedString):
                parts.extend(prefix + part for part in arg.parts)
            else:
                parts.append(prefix + str(arg))
        return FormattedString(tuple(parts))

    def __call__(self, *args: object) -> FormattedString:
        return self.apply(args)

    def __add__(self, other: object) -> Formatter:
        if not isinstance(other, Formatter):
            return NotImplemented
        return combine(self, other)


def sgr(*codes: str) -> Formatter:
    """Create a Formatter from SGR parameter codes."""
    return Formatter(codes)


def combine(first: Formatter, second: Formatter) -> Formatter:
    """Combine two formatters into one, keeping the order of their codes."""
    return Formatter(first.codes + second.codes)
