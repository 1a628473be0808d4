# topmark:header:start
#
#   project      : elm-enums
#   file         : driver.py
#   file_relpath : src/elm_enums/driver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conversion driver: read definitions, translate once, install the output.

One run performs exactly one read, one translation request and (on success)
one backup rename plus one write. Every failure raises an
[`ElmEnumsError`][elm_enums.cli.errors.ElmEnumsError] subclass carrying the
exit code of the historical contract:

| Situation                              | Exception                | Exit code |
|----------------------------------------|--------------------------|-----------|
| input missing                          | `InputNotFoundError`     | 1         |
| input permission denied                | `InputPermissionError`   | 1         |
| input is a directory                   | `InputNotAFileError`     | 1         |
| input not UTF-8                        | `InputEncodingError`     | 1         |
| any other OS error on input            | `InputUncaughtError`     | 1         |
| translator rejected the definitions    | `DefinitionsSyntaxError` | 3         |
| backup rename or output write failed   | `OutputWriteError`       | 4         |
"""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from elm_enums.cli.console import current_console
from elm_enums.cli.errors import (
    DefinitionsSyntaxError,
    InputEncodingError,
    InputNotAFileError,
    InputNotFoundError,
    InputPermissionError,
    InputUncaughtError,
    OutputWriteError,
)
from elm_enums.config.logging import get_logger
from elm_enums.translator.channel import TranslationChannel
from elm_enums.translator.contracts import TranslationFailure, TranslationSuccess
from elm_enums.translator.elm import ElmTranslator

if TYPE_CHECKING:
    from elm_enums.cli.console import ClickConsole
    from elm_enums.config import Config
    from elm_enums.config.logging import ElmEnumsLogger
    from elm_enums.translator.contracts import TranslationResult, Translator

logger: ElmEnumsLogger = get_logger(__name__)


@dataclass(frozen=True)
class ConversionReport:
    """Outcome of a successful conversion.

    Attributes:
        output_path (Path): The written Elm module.
        backup_path (Path | None): Where the previous module went, if there was one.
        bytes_written (int): Size of the written module in UTF-8 bytes.
    """

    output_path: Path
    backup_path: Path | None
    bytes_written: int


def display_path(path: Path) -> str:
    """Render ``path`` for messages: ``./enums.defs`` when relative, as-is when absolute."""
    if path.is_absolute():
        return str(path)
    return f"./{path.as_posix()}"


def read_definitions(path: Path) -> str:
    """Read the whole definitions file as UTF-8 text.

    Args:
        path (Path): The definitions file.

    Returns:
        str: The file contents.

    Raises:
        InputNotFoundError: ``path`` does not exist.
        InputPermissionError: ``path`` may not be opened for reading.
        InputNotAFileError: ``path`` is a directory.
        InputEncodingError: the contents are not valid UTF-8.
        InputUncaughtError: any other OS error.
    """
    shown = display_path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        logger.error("%s: %s", e, path)
        raise InputNotFoundError(f"Error: Could not find input file {shown}") from e
    except PermissionError as e:
        logger.error("%s: %s", e, path)
        raise InputPermissionError(
            f"Permission denied: unable to open file {shown} for reading"
        ) from e
    except IsADirectoryError as e:
        logger.error("%s: %s", e, path)
        raise InputNotAFileError(f"Error: {shown} is not a regular file") from e
    except UnicodeDecodeError as e:
        logger.error("Encoding error while reading %s: %s", path, e)
        raise InputEncodingError(f"Error: {shown} is not valid UTF-8 text") from e
    except OSError as e:
        code = errno.errorcode.get(e.errno, str(e.errno)) if e.errno is not None else "UNKNOWN"
        logger.exception("Unexpected OS error reading %s", path)
        raise InputUncaughtError(f"Uncaught Error: {code}. Please file a bug report!") from e
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def request_translation(translator: Translator, source: str) -> TranslationResult:
    """Send ``source`` through a fresh one-shot channel and return the single result."""
    results: list[TranslationResult] = []
    channel = TranslationChannel(translator)
    channel.subscribe(results.append)
    channel.send(source)
    # The channel delivers exactly one result per request
    assert len(results) == 1, "translation channel delivered no result"
    return results[0]


def install_output(path: Path, text: str, *, backup_path: Path | None) -> Path | None:
    """Write ``text`` to ``path``, moving an existing file to ``backup_path`` first.

    If the write fails after the previous file was moved away, it is moved back.

    Args:
        path (Path): The output file.
        text (str): Generated source text.
        backup_path (Path | None): Backup location; ``None`` overwrites without a backup.

    Returns:
        Path | None: ``backup_path`` if a previous file was moved there, else ``None``.

    Raises:
        OutputWriteError: If the rename or the write fails.
    """
    shown = display_path(path)
    moved: Path | None = None
    if backup_path is not None and path.exists():
        try:
            os.replace(path, backup_path)
        except OSError as e:
            logger.error("Cannot move %s to %s: %s", path, backup_path, e)
            raise OutputWriteError(
                f"Error: unable to write {shown}: cannot move old version to "
                f"{display_path(backup_path)} ({e.strerror or e})"
            ) from e
        moved = backup_path
        logger.debug("Moved %s to %s", path, backup_path)

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        logger.error("Cannot write %s: %s", path, e)
        if moved is not None:
            try:
                os.replace(moved, path)
                logger.info("Restored %s from %s", path, moved)
            except OSError as restore_error:
                logger.error("Cannot restore %s from %s: %s", path, moved, restore_error)
        raise OutputWriteError(f"Error: unable to write {shown}: {e.strerror or e}") from e

    return moved


def run_conversion(
    config: Config,
    *,
    translator: Translator | None = None,
    console: ClickConsole | None = None,
) -> ConversionReport:
    """Run one conversion: read, translate, back up, write.

    Args:
        config (Config): Paths, backup policy, module name and verbosity.
        translator (Translator | None): Translator to use; defaults to an
            [`ElmTranslator`][elm_enums.translator.elm.ElmTranslator] for
            ``config.effective_module_name``.
        console (ClickConsole | None): Output console; defaults to the console of
            the running command (or an uncolored one outside Click).

    Returns:
        ConversionReport: What was written.

    Raises:
        InputFileError: The definitions could not be read.
        DefinitionsSyntaxError: The translator rejected the definitions.
        OutputWriteError: The output could not be installed.
    """
    console = console or current_console()
    input_shown = display_path(config.input_path)
    output_shown = display_path(config.output_path)

    source = read_definitions(config.input_path)

    if translator is None:
        translator = ElmTranslator(
            module_name=config.effective_module_name, source_name=input_shown
        )
    result = request_translation(translator, source)

    if isinstance(result, TranslationFailure):
        raise DefinitionsSyntaxError(f"Syntax error in {input_shown}: {result.error}")
    assert isinstance(result, TranslationSuccess)

    backup_path = install_output(
        config.output_path,
        result.generated,
        backup_path=config.backup_path if config.backup else None,
    )
    quiet = config.verbosity_level < 0
    if backup_path is not None and not quiet:
        console.info(f"Old version of {output_shown} moved to {display_path(backup_path)}")
    if not quiet:
        console.success(f"types and decoders written to {output_shown}")

    report = ConversionReport(
        output_path=config.output_path,
        backup_path=backup_path,
        bytes_written=len(result.generated.encode("utf-8")),
    )
    if config.verbosity_level > 0:
        console.print(
            f"  {report.bytes_written} bytes, module {config.effective_module_name}"
            f" (from {input_shown})"
        )
    logger.info("Conversion finished: %s", report)
    return report
