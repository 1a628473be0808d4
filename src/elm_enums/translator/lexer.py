# topmark:header:start
#
#   project      : elm-enums
#   file         : lexer.py
#   file_relpath : src/elm_enums/translator/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Tokenizer for enum definitions.

Recognized tokens:
  * ``type`` keyword
  * capitalized identifiers (``[A-Z][A-Za-z0-9_]*``)
  * lower-case identifiers (only to report them precisely)
  * ``=`` and ``|``
  * double-quoted string literals with ``\"``, ``\\``, ``\n``, ``\t`` escapes

Whitespace, ``-- line comments`` and ``{- block comments -}`` are skipped.
Block comments nest, as they do in Elm.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from elm_enums.translator.errors import DefinitionError

if TYPE_CHECKING:
    from collections.abc import Iterator


class TokenKind(str, Enum):
    """Kinds of tokens produced by `tokenize`."""

    TYPE = "type"
    UPPER_NAME = "upper-name"
    LOWER_NAME = "lower-name"
    EQUALS = "="
    PIPE = "|"
    STRING = "string"
    EOF = "end of input"


@dataclass(frozen=True, slots=True)
class Token:
    """A token with its 1-based source position."""

    kind: TokenKind
    text: str
    line: int
    column: int

    def describe(self) -> str:
        """Human-readable description for error messages."""
        if self.kind is TokenKind.EOF:
            return "end of input"
        if self.kind is TokenKind.STRING:
            return f'string "{self.text}"'
        return f"'{self.text}'"


_TOKEN_RE = re.compile(
    r"""
    (?P<ws>[ \t\r\n\f]+)
  | (?P<line_comment>--[^\n]*)
  | (?P<name>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<equals>=)
  | (?P<pipe>\|)
  | (?P<string>"(?:[^"\\\n]|\\.)*")
    """,
    re.VERBOSE,
)

_ESCAPES: dict[str, str] = {'"': '"', "\\": "\\", "n": "\n", "t": "\t"}


class _Cursor:
    """Tracks line/column while walking the source text."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def advance(self, text: str) -> None:
        newlines = text.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind("\n")
        else:
            self.column += len(text)
        self.pos += len(text)


def _decode_string(raw: str, line: int, column: int) -> str:
    body = raw[1:-1]
    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            esc = body[i + 1]
            if esc not in _ESCAPES:
                raise DefinitionError(
                    f"unknown escape sequence '\\{esc}' in string literal",
                    line=line,
                    column=column + i + 1,
                )
            out.append(_ESCAPES[esc])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _skip_block_comment(cur: _Cursor) -> None:
    start_line, start_column = cur.line, cur.column
    depth = 0
    src = cur.source
    while cur.pos < len(src):
        if src.startswith("{-", cur.pos):
            depth += 1
            cur.advance("{-")
        elif src.startswith("-}", cur.pos):
            depth -= 1
            cur.advance("-}")
            if depth == 0:
                return
        else:
            cur.advance(src[cur.pos])
    raise DefinitionError("unterminated block comment", line=start_line, column=start_column)


def tokenize(source: str) -> Iterator[Token]:
    """Yield the tokens of ``source``, ending with a single EOF token.

    Args:
        source (str): The definitions text.

    Yields:
        Token: The next significant token.

    Raises:
        DefinitionError: On characters that cannot start a token, unterminated
            strings or block comments, and unknown string escapes.
    """
    cur = _Cursor(source)
    while cur.pos < len(source):
        if source.startswith("{-", cur.pos):
            _skip_block_comment(cur)
            continue

        m = _TOKEN_RE.match(source, cur.pos)
        if m is None:
            ch = source[cur.pos]
            if ch == '"':
                raise DefinitionError(
                    "unterminated string literal", line=cur.line, column=cur.column
                )
            raise DefinitionError(
                f"unexpected character {ch!r}", line=cur.line, column=cur.column
            )

        text = m.group()
        group = m.lastgroup
        line, column = cur.line, cur.column
        cur.advance(text)

        if group in ("ws", "line_comment"):
            continue
        if group == "name":
            if text == "type":
                yield Token(TokenKind.TYPE, text, line, column)
            elif text[0].isupper():
                yield Token(TokenKind.UPPER_NAME, text, line, column)
            else:
                yield Token(TokenKind.LOWER_NAME, text, line, column)
        elif group == "equals":
            yield Token(TokenKind.EQUALS, text, line, column)
        elif group == "pipe":
            yield Token(TokenKind.PIPE, text, line, column)
        else:
            yield Token(TokenKind.STRING, _decode_string(text, line, column), line, column)

    yield Token(TokenKind.EOF, "", cur.line, cur.column)
