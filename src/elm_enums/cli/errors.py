# topmark:header:start
#
#   project      : elm-enums
#   file         : errors.py
#   file_relpath : src/elm_enums/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the elm-enums CLI.

Usage:
    Raise these exceptions from the conversion driver to signal errors with
    standardized messages and exit codes. Click renders them and exits with
    their ``exit_code``.

Styling:
    Click shows an exception only after the command context is gone, so the
    command attaches its console to the exception (``console``) before
    re-raising; `show()` renders through it, or through an uncolored console
    when none was attached.
"""

from __future__ import annotations

from typing import IO, Any

import click

from elm_enums.cli.console import ClickConsole
from elm_enums.core.exit_codes import ExitCode


class ElmEnumsError(click.ClickException):
    """Base class for all elm-enums CLI errors."""

    exit_code = ExitCode.INPUT_ERROR
    console: ClickConsole | None = None

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color or an ``Error:`` prefix.
            - Colorization is applied in `show()` by the attached console.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Write the message to stderr (or ``file``) through the attached console."""
        console = self.console
        if console is None or file is not None:
            enable_color = console.enable_color if console is not None else False
            console = ClickConsole(enable_color=enable_color, err=file)
        console.error(self.format_message())


class InputFileError(ElmEnumsError):
    """Base class for errors reading the definitions file."""

    exit_code = ExitCode.INPUT_ERROR


class InputNotFoundError(InputFileError):
    """The definitions file does not exist."""


class InputPermissionError(InputFileError):
    """The definitions file exists but may not be opened for reading."""


class InputNotAFileError(InputFileError):
    """The definitions path is a directory (or otherwise not a regular file)."""


class InputEncodingError(InputFileError):
    """The definitions file is not valid UTF-8 text."""


class InputUncaughtError(InputFileError):
    """Any other OS error while reading the definitions file."""


class DefinitionsSyntaxError(ElmEnumsError):
    """The translator rejected the definitions."""

    exit_code = ExitCode.SYNTAX_ERROR


class OutputWriteError(ElmEnumsError):
    """The generated module (or the backup of its previous version) could not be written."""

    exit_code = ExitCode.OUTPUT_ERROR


class ConfigError(ElmEnumsError):
    """Error for configuration errors (malformed TOML, values of the wrong type)."""

    exit_code = ExitCode.CONFIG_ERROR


class ElmEnumsUsageError(click.UsageError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR
