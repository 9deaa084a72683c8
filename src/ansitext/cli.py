"""Ansitext command line interface.

Format text with nestable ANSI styles from the shell, list the named styles,
and look up xterm palette colors.
"""

import contextlib
import functools
import sys
import typing

import typer
from rich.markup import escape

from ansitext.color_mode import ColorMode, ColorOption, detect_color_mode
from ansitext.console import (
    print_error,
    print_verbose,
    print_warning,
    set_verbose,
)
from ansitext.formatter import Formatter, combine
from ansitext.palette import (
    InvalidColorError,
    custom_color,
    custom_color_bg,
    parse_rgb,
    rgb_to_xterm,
)
from ansitext.styles import STYLES, UnknownStyleError, get_style

app = typer.Typer(no_args_is_help=True)


# ruff: noqa: FBT001 FBT003 Typer API uses boolean arguments for flags
# ruff: noqa: B008 function-call-in-default-argument

COLOR_HELP = "Keep escape sequences: auto, always or never"


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show verbose output"
    ),
) -> None:
    """Ansitext: nestable ANSI formatting for terminal text."""
    if verbose:
        set_verbose()


@app.command()
def style(
    text: list[str] = typer.Argument(..., help="Text to format"),
    style_names: list[str] | None = typer.Option(
        None, "-s", "--style", help="Named style, may be repeated"
    ),
    fg: str = typer.Option(
        "", "--fg", help="Foreground color as R,G,B channels from 0 to 1"
    ),
    bg: str = typer.Option(
        "", "--bg", help="Background color as R,G,B channels from 0 to 1"
    ),
    separator: str = typer.Option(
        " ", "--separator", help="Plain text printed between arguments"
    ),
    color: ColorOption = typer.Option(
        ColorOption.AUTO, "--color", help=COLOR_HELP
    ),
) -> None:
    """Print TEXT arguments formatted with the given styles."""
    with _library_errors():
        formatter = _build_formatter(style_names or [], fg, bg)
    mode = _color_mode(color)
    if formatter is None:
        print_warning("No style given, printing plain text")
    elif mode == ColorMode.ALWAYS:
        print_verbose("SGR codes:", escape(";".join(formatter.codes)))
        text = [formatter(part).render() for part in text]
    _write_line(sys.stdout, separator.join(text))


@app.command("styles")
def list_styles(
    color: ColorOption = typer.Option(
        ColorOption.AUTO, "--color", help=COLOR_HELP
    ),
) -> None:
    """List the named styles and their SGR codes."""
    mode = _color_mode(color)
    width = max(len(name) for name in STYLES)
    for name, formatter in STYLES.items():
        label = name.ljust(width)
        if mode == ColorMode.ALWAYS:
            label = str(formatter(label))
        _write_line(sys.stdout, f"{label}  {';'.join(formatter.codes)}")


@app.command()
def rgb(
    red: float = typer.Argument(..., help="Red channel, from 0 to 1"),
    green: float = typer.Argument(..., help="Green channel, from 0 to 1"),
    blue: float = typer.Argument(..., help="Blue channel, from 0 to 1"),
    background: bool = typer.Option(
        False, "--bg", help="Show the background color code"
    ),
    color: ColorOption = typer.Option(
        ColorOption.AUTO, "--color", help=COLOR_HELP
    ),
) -> None:
    """Show the xterm palette index nearest to an RGB color."""
    with _library_errors():
        index = rgb_to_xterm(red, green, blue)
        factory = custom_color_bg if background else custom_color
        formatter = factory(red, green, blue)
    line = f"{index}\t{';'.join(formatter.codes)}"
    if _color_mode(color) == ColorMode.ALWAYS:
        sample = "      " if background else "██████"
        line += f"\t{formatter(sample)}"
    _write_line(sys.stdout, line)


def _build_formatter(
    style_names: list[str], fg: str, bg: str
) -> Formatter | None:
    """Combine named styles, then custom colors, into a single formatter."""
    formatters = [get_style(name) for name in style_names]
    if fg:
        formatters.append(custom_color(*parse_rgb(fg)))
    if bg:
        formatters.append(custom_color_bg(*parse_rgb(bg)))
    if not formatters:
        return None
    return functools.reduce(combine, formatters)


def _color_mode(option: ColorOption) -> ColorMode:
    mode = detect_color_mode(option)
    print_verbose("Color mode:", mode.value)
    return mode


@contextlib.contextmanager
def _library_errors() -> typing.Iterator[None]:
    """Report invalid styles and colors, and exit with an error status."""
    try:
        yield
    except UnknownStyleError as error:
        names = ", ".join(STYLES)
        print_error(None, f"Unknown style {escape(repr(error.args[0]))}.")
        print_error("Known styles:", names)
        raise typer.Exit(1) from error
    except InvalidColorError as error:
        print_error(None, escape(str(error)))
        raise typer.Exit(1) from error


def _write_line(output: typing.IO[str], line: str) -> None:
    output.write(line + "\n")
    output.flush()
