# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/elm_enums/cli/options.py
#   project      : elm-enums
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the elm-enums command.

This module centralizes reusable options (verbosity, color, config selection)
and their resolution logic, so the command itself can stay thin. The helpers
here are Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from elm_enums.cli.errors import ElmEnumsUsageError
from elm_enums.translator.elm import is_valid_module_name

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``verbose_count`` if positive, ``-quiet_count`` if positive, else 0.

    Raises:
        ElmEnumsUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ElmEnumsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counted -v/--verbose and -q/--quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (adds a summary line after success).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational and success messages. Errors are always shown.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        stdout_isatty (bool | None): Whether stdout is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        Honors --color and --no-color CLI flags, then the FORCE_COLOR and
        NO_COLOR environment variables, then falls back to TTY detection.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color (auto, always, never) and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def validate_module_name(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> str | None:
    """Click callback rejecting names that are not valid Elm module names."""
    if value is not None and not is_valid_module_name(value):
        raise click.BadParameter(
            f"{value!r} is not a valid Elm module name (expected e.g. 'Enums' or 'Api.Enums')."
        )
    return value


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --config (repeatable) and --no-config options to a command."""
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(exists=True, dir_okay=False, path_type=str),
        multiple=True,
        help="Additional TOML config file(s), applied after the discovered one.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        help="Do not look for elm-enums.toml / pyproject.toml in the current directory.",
    )(f)
    return f
