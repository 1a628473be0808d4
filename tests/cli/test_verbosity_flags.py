# topmark:header:start
#
#   project      : elm-enums
#   file         : test_verbosity_flags.py
#   file_relpath : tests/cli/test_verbosity_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program-output verbosity (`-v` / `-q`) and color flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_INPUT_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli_in,
)
from tests.conftest import mark_cli, parametrize, write_defs

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_quiet_suppresses_info_and_success(tmp_path: Path) -> None:
    """`-q` prints nothing on success, even when a backup is made."""
    write_defs(tmp_path)
    (tmp_path / "Enums.elm").write_text("previous\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["-q"])

    assert_SUCCESS(result)
    assert result.output == ""
    assert (tmp_path / "Enums.elm.bak").exists()


@mark_cli
def test_quiet_still_reports_errors(tmp_path: Path) -> None:
    """Errors are printed regardless of `-q`."""
    result: Result = run_cli_in(tmp_path, ["-qq"])

    assert_INPUT_ERROR(result)
    assert "Error: Could not find input file ./enums.defs" in result.output


@mark_cli
def test_verbose_adds_summary_line(tmp_path: Path) -> None:
    """`-v` appends the size and module name after the success line."""
    write_defs(tmp_path)

    result: Result = run_cli_in(tmp_path, ["-v"])

    assert_SUCCESS(result)
    lines: list[str] = result.output.splitlines()
    assert lines[0] == "Success: types and decoders written to ./Enums.elm"
    size: int = len((tmp_path / "Enums.elm").read_bytes())
    assert lines[1] == f"  {size} bytes, module Enums (from ./enums.defs)"


@mark_cli
def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    """Combining `-v` and `-q` is a usage error and nothing is written."""
    write_defs(tmp_path)

    result: Result = run_cli_in(tmp_path, ["-v", "-q"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output
    assert not (tmp_path / "Enums.elm").exists()


@mark_cli
@parametrize("argv", [["--no-color"], ["--color", "never"], ["--color", "always"]])
def test_color_flags_are_accepted(tmp_path: Path, argv: list[str]) -> None:
    """Color options never change what is written, only how lines are styled."""
    write_defs(tmp_path)

    result: Result = run_cli_in(tmp_path, argv)

    assert_SUCCESS(result)
    assert "Success: types and decoders written to ./Enums.elm" in result.output


@mark_cli
def test_invalid_color_choice_is_usage_error(tmp_path: Path) -> None:
    """`--color` only accepts auto, always and never."""
    result: Result = run_cli_in(tmp_path, ["--color", "sometimes"])

    assert_USAGE_ERROR(result)
