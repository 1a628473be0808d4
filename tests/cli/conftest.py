# topmark:header:start
#
#   project      : elm-enums
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running elm-enums in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click command, since elm-enums resolves ``enums.defs`` and
``Enums.elm`` against the CWD.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from elm_enums.cli.main import cli
from elm_enums.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None = None) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["-q"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv or [], obj={})
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None = None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this for tests that do not touch the filesystem (``--help``,
    ``--version``).
    """
    runner = CliRunner()
    return runner.invoke(cli, argv or [], obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_INPUT_ERROR(result: Result) -> None:
    """Assert that the command exited with INPUT_ERROR (code 1)."""
    assert result.exit_code == ExitCode.INPUT_ERROR, result.output


def assert_SYNTAX_ERROR(result: Result) -> None:
    """Assert that the command exited with SYNTAX_ERROR (code 3)."""
    assert result.exit_code == ExitCode.SYNTAX_ERROR, result.output


def assert_OUTPUT_ERROR(result: Result) -> None:
    """Assert that the command exited with OUTPUT_ERROR (code 4)."""
    assert result.exit_code == ExitCode.OUTPUT_ERROR, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 2)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
