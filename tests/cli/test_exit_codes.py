# topmark:header:start
#
#   project      : elm-enums
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes and messages of a plain ``elm-enums`` run (no options).

Each test runs in its own temporary working directory, since the command reads
``./enums.defs`` and writes ``./Enums.elm`` relative to the CWD.
"""

from __future__ import annotations

import errno
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from elm_enums.translator.contracts import TranslationSuccess
from elm_enums.translator.elm import ElmTranslator
from tests.cli.conftest import (
    assert_INPUT_ERROR,
    assert_SUCCESS,
    assert_SYNTAX_ERROR,
    run_cli_in,
)
from tests.conftest import VALID_DEFS, mark_cli, write_defs

if TYPE_CHECKING:
    from click.testing import Result

_real_read_text = Path.read_text


def _read_text_raising(exc: OSError) -> Any:
    """Return a ``Path.read_text`` replacement that fails only for ``enums.defs``."""

    def _read_text(self: Path, *args: Any, **kwargs: Any) -> str:
        if self.name == "enums.defs":
            raise exc
        return _real_read_text(self, *args, **kwargs)

    return _read_text


@mark_cli
def test_missing_input_exits_1(tmp_path: Path) -> None:
    """No ``enums.defs`` → exit 1 with the not-found message, no output file."""
    result: Result = run_cli_in(tmp_path)

    assert_INPUT_ERROR(result)
    assert "Error: Could not find input file ./enums.defs" in result.output
    assert not (tmp_path / "Enums.elm").exists()


@mark_cli
def test_input_is_directory_exits_1(tmp_path: Path) -> None:
    """A directory named ``enums.defs`` is not a regular file."""
    (tmp_path / "enums.defs").mkdir()

    result: Result = run_cli_in(tmp_path)

    assert_INPUT_ERROR(result)
    assert "Error: ./enums.defs is not a regular file" in result.output
    assert not (tmp_path / "Enums.elm").exists()


@mark_cli
def test_permission_denied_exits_1(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """An unreadable input → exit 1 with the permission message."""
    write_defs(tmp_path)
    # chmod is ineffective when the suite runs as root, so fail the read itself
    monkeypatch.setattr(
        Path,
        "read_text",
        _read_text_raising(PermissionError(errno.EACCES, "Permission denied")),
    )

    result: Result = run_cli_in(tmp_path)

    assert_INPUT_ERROR(result)
    assert "Permission denied: unable to open file ./enums.defs for reading" in result.output
    assert not (tmp_path / "Enums.elm").exists()


@mark_cli
def test_other_os_error_reports_errno_name(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Unclassified OS errors are reported by their errno name."""
    write_defs(tmp_path)
    monkeypatch.setattr(
        Path, "read_text", _read_text_raising(OSError(errno.EIO, "Input/output error"))
    )

    result: Result = run_cli_in(tmp_path)

    assert_INPUT_ERROR(result)
    assert "Uncaught Error: EIO. Please file a bug report!" in result.output


@mark_cli
def test_invalid_utf8_exits_1(tmp_path: Path) -> None:
    """Bytes that do not decode as UTF-8 are an input error, not a syntax error."""
    (tmp_path / "enums.defs").write_bytes(b"type Color = R\xe9d\n")

    result: Result = run_cli_in(tmp_path)

    assert_INPUT_ERROR(result)
    assert "Error: ./enums.defs is not valid UTF-8 text" in result.output


@mark_cli
def test_syntax_error_exits_3_and_leaves_output_alone(tmp_path: Path) -> None:
    """A rejected translation exits 3 and never touches an existing ``Enums.elm``."""
    write_defs(tmp_path, "type Color = Red |\n")
    (tmp_path / "Enums.elm").write_text("old\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path)

    assert_SYNTAX_ERROR(result)
    assert (
        "Syntax error in ./enums.defs: line 2, column 1: "
        "expected a constructor name in type 'Color' but found end of input"
    ) in result.output
    assert (tmp_path / "Enums.elm").read_text(encoding="utf-8") == "old\n"
    assert not (tmp_path / "Enums.elm.bak").exists()


@mark_cli
def test_empty_input_is_a_syntax_error(tmp_path: Path) -> None:
    """An empty definitions file has nothing to generate."""
    write_defs(tmp_path, "")

    result: Result = run_cli_in(tmp_path)

    assert_SYNTAX_ERROR(result)
    assert "Syntax error in ./enums.defs: line 1, column 1: no enum definitions found" in (
        result.output
    )
    assert not (tmp_path / "Enums.elm").exists()


@mark_cli
def test_first_run_writes_output_without_info_line(tmp_path: Path) -> None:
    """Without a previous ``Enums.elm`` only the success line is printed."""
    write_defs(tmp_path)

    result: Result = run_cli_in(tmp_path)

    assert_SUCCESS(result)
    assert result.output == "Success: types and decoders written to ./Enums.elm\n"
    expected = ElmTranslator().translate(VALID_DEFS)
    assert isinstance(expected, TranslationSuccess)
    assert (tmp_path / "Enums.elm").read_text(encoding="utf-8") == expected.generated
    assert not (tmp_path / "Enums.elm.bak").exists()


@mark_cli
def test_second_run_backs_up_previous_output(tmp_path: Path) -> None:
    """Re-running keeps the previous module as ``Enums.elm.bak``."""
    write_defs(tmp_path)
    assert_SUCCESS(run_cli_in(tmp_path))
    first: str = (tmp_path / "Enums.elm").read_text(encoding="utf-8")

    write_defs(tmp_path, "type Color = Red | Green | Blue | Black\n")
    result: Result = run_cli_in(tmp_path)

    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "Info: Old version of ./Enums.elm moved to ./Enums.elm.bak",
        "Success: types and decoders written to ./Enums.elm",
    ]
    assert (tmp_path / "Enums.elm.bak").read_text(encoding="utf-8") == first
    assert "Black" in (tmp_path / "Enums.elm").read_text(encoding="utf-8")


@mark_cli
def test_older_backup_is_replaced(tmp_path: Path) -> None:
    """An existing ``Enums.elm.bak`` is overwritten by the newer previous version."""
    write_defs(tmp_path)
    (tmp_path / "Enums.elm").write_text("previous\n", encoding="utf-8")
    (tmp_path / "Enums.elm.bak").write_text("ancient\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path)

    assert_SUCCESS(result)
    assert (tmp_path / "Enums.elm.bak").read_text(encoding="utf-8") == "previous\n"


@mark_cli
def test_rerun_with_same_input_is_stable(tmp_path: Path) -> None:
    """Translating the same definitions twice yields identical modules."""
    write_defs(tmp_path)
    assert_SUCCESS(run_cli_in(tmp_path))
    assert_SUCCESS(run_cli_in(tmp_path))

    assert (tmp_path / "Enums.elm").read_text(encoding="utf-8") == (
        tmp_path / "Enums.elm.bak"
    ).read_text(encoding="utf-8")


@mark_cli
def test_missing_input_error_goes_to_stderr(tmp_path: Path) -> None:
    """Error lines are written to stderr only."""
    result: Result = run_cli_in(tmp_path)

    assert_INPUT_ERROR(result)
    assert result.stdout == ""
    assert result.stderr == "Error: Could not find input file ./enums.defs\n"


@mark_cli
def test_syntax_error_goes_to_stderr(tmp_path: Path) -> None:
    """Syntax errors are written to stderr only."""
    write_defs(tmp_path, "type Color = red\n")

    result: Result = run_cli_in(tmp_path)

    assert_SYNTAX_ERROR(result)
    assert result.stdout == ""
    assert result.stderr.startswith("Syntax error in ./enums.defs: line 1, column 14: ")


@mark_cli
def test_info_and_success_go_to_stdout(tmp_path: Path) -> None:
    """Status lines are written to stdout only."""
    write_defs(tmp_path)
    assert_SUCCESS(run_cli_in(tmp_path))

    result: Result = run_cli_in(tmp_path)

    assert_SUCCESS(result)
    assert result.stderr == ""
    assert result.stdout == (
        "Info: Old version of ./Enums.elm moved to ./Enums.elm.bak\n"
        "Success: types and decoders written to ./Enums.elm\n"
    )


@mark_cli
def test_errors_are_styled_when_color_is_forced(tmp_path: Path) -> None:
    """`--color always` styles the error line; `--no-color` leaves it plain."""
    colored: Result = run_cli_in(tmp_path, ["--color", "always"])
    plain: Result = run_cli_in(tmp_path, ["--no-color"])

    assert_INPUT_ERROR(colored)
    assert "\x1b[" in colored.stderr
    assert "Error: Could not find input file ./enums.defs" in colored.stderr
    assert_INPUT_ERROR(plain)
    assert plain.stderr == "Error: Could not find input file ./enums.defs\n"
