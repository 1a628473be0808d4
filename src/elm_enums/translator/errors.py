# topmark:header:start
#
#   project      : elm-enums
#   file         : errors.py
#   file_relpath : src/elm_enums/translator/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errors raised while tokenizing or parsing enum definitions."""

from __future__ import annotations


class DefinitionError(Exception):
    """A syntax or consistency error at a given source position.

    Args:
        message (str): What went wrong.
        line (int): 1-based line number.
        column (int): 1-based column number.
    """

    def __init__(self, message: str, *, line: int, column: int) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}: {self.message}"
