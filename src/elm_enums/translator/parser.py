# topmark:header:start
#
#   project      : elm-enums
#   file         : parser.py
#   file_relpath : src/elm_enums/translator/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive-descent parser for enum definitions.

Grammar (whitespace and comments are insignificant)::

    definitions := declaration+
    declaration := "type" TypeName "=" variant ( "|" variant )*
    variant     := VariantName [ StringLiteral ]

After parsing, the declarations are checked for name clashes: type names and
constructor names must be unique across the file (constructors share one
namespace in an Elm module), wire values must be unique within a type, and
names that would clash with Elm's implicitly imported core types or
constructors are refused.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from elm_enums.config.logging import get_logger
from elm_enums.translator.errors import DefinitionError
from elm_enums.translator.lexer import Token, TokenKind, tokenize
from elm_enums.translator.model import EnumDefinition, EnumVariant

if TYPE_CHECKING:
    from collections.abc import Iterable

    from elm_enums.config.logging import ElmEnumsLogger

logger: ElmEnumsLogger = get_logger(__name__)

# Names exposed by Elm's default imports (Basics, List, Maybe, Result, String,
# Char, Platform, Platform.Cmd, Platform.Sub)
ELM_CORE_TYPES: Final[frozenset[str]] = frozenset(
    {
        "Bool",
        "Char",
        "Cmd",
        "Float",
        "Int",
        "List",
        "Maybe",
        "Never",
        "Order",
        "Program",
        "Result",
        "String",
        "Sub",
    }
)
ELM_CORE_CONSTRUCTORS: Final[frozenset[str]] = frozenset(
    {"True", "False", "Just", "Nothing", "LT", "EQ", "GT", "Ok", "Err"}
)


class _Parser:
    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: list[Token] = list(tokens)
        self._index: int = 0

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _next(self) -> Token:
        tok = self._tokens[self._index]
        if tok.kind is not TokenKind.EOF:
            self._index += 1
        return tok

    def parse(self) -> tuple[EnumDefinition, ...]:
        definitions: list[EnumDefinition] = []
        while self._peek().kind is not TokenKind.EOF:
            definitions.append(self._declaration())
        if not definitions:
            eof = self._peek()
            raise DefinitionError("no enum definitions found", line=eof.line, column=eof.column)
        return tuple(definitions)

    def _declaration(self) -> EnumDefinition:
        kw = self._next()
        if kw.kind is not TokenKind.TYPE:
            raise DefinitionError(
                f"expected 'type' but found {kw.describe()}", line=kw.line, column=kw.column
            )

        name_tok = self._next()
        if name_tok.kind is TokenKind.LOWER_NAME:
            raise DefinitionError(
                f"type name '{name_tok.text}' must start with an upper-case letter",
                line=name_tok.line,
                column=name_tok.column,
            )
        if name_tok.kind is not TokenKind.UPPER_NAME:
            raise DefinitionError(
                f"expected a type name after 'type' but found {name_tok.describe()}",
                line=name_tok.line,
                column=name_tok.column,
            )

        eq = self._next()
        if eq.kind is not TokenKind.EQUALS:
            raise DefinitionError(
                f"expected '=' after type name '{name_tok.text}' but found {eq.describe()}",
                line=eq.line,
                column=eq.column,
            )

        variants: list[EnumVariant] = [self._variant(name_tok.text)]
        while self._peek().kind is TokenKind.PIPE:
            self._next()
            variants.append(self._variant(name_tok.text))

        follow = self._peek()
        if follow.kind not in (TokenKind.TYPE, TokenKind.EOF):
            raise DefinitionError(
                f"expected '|' or a new 'type' declaration but found {follow.describe()}",
                line=follow.line,
                column=follow.column,
            )

        logger.trace("Parsed type %s with %d variants", name_tok.text, len(variants))
        return EnumDefinition(
            name=name_tok.text,
            variants=tuple(variants),
            line=name_tok.line,
            column=name_tok.column,
        )

    def _variant(self, type_name: str) -> EnumVariant:
        tok = self._next()
        if tok.kind is TokenKind.LOWER_NAME:
            raise DefinitionError(
                f"constructor '{tok.text}' must start with an upper-case letter",
                line=tok.line,
                column=tok.column,
            )
        if tok.kind is not TokenKind.UPPER_NAME:
            raise DefinitionError(
                f"expected a constructor name in type '{type_name}' but found {tok.describe()}",
                line=tok.line,
                column=tok.column,
            )
        wire_value = tok.text
        if self._peek().kind is TokenKind.STRING:
            wire_value = self._next().text
        return EnumVariant(
            name=tok.text, wire_value=wire_value, line=tok.line, column=tok.column
        )


def _check_names(definitions: tuple[EnumDefinition, ...]) -> None:
    type_lines: dict[str, int] = {}
    constructor_owner: dict[str, EnumDefinition] = {}

    for definition in definitions:
        if definition.name in ELM_CORE_TYPES:
            raise DefinitionError(
                f"type name '{definition.name}' clashes with Elm's core type of the same name",
                line=definition.line,
                column=definition.column,
            )
        if definition.name in type_lines:
            raise DefinitionError(
                f"type '{definition.name}' is already defined on line "
                f"{type_lines[definition.name]}",
                line=definition.line,
                column=definition.column,
            )
        type_lines[definition.name] = definition.line

        wire_owner: dict[str, str] = {}
        for variant in definition.variants:
            if variant.name in ELM_CORE_CONSTRUCTORS:
                raise DefinitionError(
                    f"constructor '{variant.name}' clashes with Elm's core constructor "
                    "of the same name",
                    line=variant.line,
                    column=variant.column,
                )
            owner = constructor_owner.get(variant.name)
            if owner is not None:
                raise DefinitionError(
                    f"constructor '{variant.name}' is already defined in type '{owner.name}' "
                    f"(line {owner.line})",
                    line=variant.line,
                    column=variant.column,
                )
            constructor_owner[variant.name] = definition

            other = wire_owner.get(variant.wire_value)
            if other is not None:
                raise DefinitionError(
                    f'value "{variant.wire_value}" is used by both \'{other}\' and '
                    f"'{variant.name}' in type '{definition.name}'",
                    line=variant.line,
                    column=variant.column,
                )
            wire_owner[variant.wire_value] = variant.name


def parse_definitions(source: str) -> tuple[EnumDefinition, ...]:
    """Parse and validate an enum definitions document.

    Args:
        source (str): The definitions text.

    Returns:
        tuple[EnumDefinition, ...]: Declarations in source order.

    Raises:
        DefinitionError: On the first syntax error or name clash.
    """
    definitions = _Parser(tokenize(source)).parse()
    _check_names(definitions)
    logger.debug("Parsed %d enum definitions", len(definitions))
    return definitions
