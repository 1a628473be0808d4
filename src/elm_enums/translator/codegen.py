# topmark:header:start
#
#   project      : elm-enums
#   file         : codegen.py
#   file_relpath : src/elm_enums/translator/codegen.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Elm source rendering for parsed enum definitions.

For every ``type T = A | B ...`` the generated module contains:

- the custom type ``T``;
- ``allT : List T`` with the constructors in declaration order;
- ``tToString : T -> String`` and ``tFromString : String -> Maybe T`` using the wire values;
- ``tDecoder : Decode.Decoder T`` decoding a JSON string;
- ``encodeT : T -> Encode.Value`` encoding to a JSON string.

The output follows ``elm-format`` layout so that re-formatting the generated
file is a no-op, and it is fully deterministic.
"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from elm_enums.translator.model import EnumDefinition

INDENT: str = "    "

_ELM_STRING_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def lower_first(name: str) -> str:
    """Return ``name`` with its first character lower-cased (``HttpMethod`` -> ``httpMethod``)."""
    return name[:1].lower() + name[1:]


def _escape_char(ch: str) -> str:
    escaped = _ELM_STRING_ESCAPES.get(ch)
    if escaped is not None:
        return escaped
    if unicodedata.category(ch) == "Cc":
        return f"\\u{{{ord(ch):04X}}}"
    return ch


def elm_string(value: str) -> str:
    """Render ``value`` as an Elm string literal.

    Control characters without a short escape are written as ``\\u{XXXX}``.
    """
    return '"' + "".join(_escape_char(ch) for ch in value) + '"'


def _indent(level: int) -> str:
    return INDENT * level


def _render_type(d: EnumDefinition) -> list[str]:
    lines = [f"type {d.name}"]
    for i, variant in enumerate(d.variants):
        lines.append(f"{_indent(1)}{'=' if i == 0 else '|'} {variant.name}")
    return lines


def _render_all(d: EnumDefinition) -> list[str]:
    fn = f"all{d.name}"
    lines = [f"{fn} : List {d.name}", f"{fn} ="]
    if len(d.variants) == 1:
        lines.append(f"{_indent(1)}[ {d.variants[0].name} ]")
        return lines
    for i, variant in enumerate(d.variants):
        lines.append(f"{_indent(1)}{'[' if i == 0 else ','} {variant.name}")
    lines.append(f"{_indent(1)}]")
    return lines


def _render_case_branches(branches: Sequence[tuple[str, str]], level: int) -> list[str]:
    lines: list[str] = []
    for i, (pattern, body) in enumerate(branches):
        if i > 0:
            lines.append("")
        lines.append(f"{_indent(level)}{pattern} ->")
        lines.append(f"{_indent(level + 1)}{body}")
    return lines


def _render_to_string(d: EnumDefinition) -> list[str]:
    fn = f"{lower_first(d.name)}ToString"
    lines = [
        f"{fn} : {d.name} -> String",
        f"{fn} value =",
        f"{_indent(1)}case value of",
    ]
    branches = [(v.name, elm_string(v.wire_value)) for v in d.variants]
    lines.extend(_render_case_branches(branches, 2))
    return lines


def _render_from_string(d: EnumDefinition) -> list[str]:
    fn = f"{lower_first(d.name)}FromString"
    lines = [
        f"{fn} : String -> Maybe {d.name}",
        f"{fn} string =",
        f"{_indent(1)}case string of",
    ]
    branches = [(elm_string(v.wire_value), f"Just {v.name}") for v in d.variants]
    branches.append(("_", "Nothing"))
    lines.extend(_render_case_branches(branches, 2))
    return lines


def _render_decoder(d: EnumDefinition) -> list[str]:
    fn = f"{lower_first(d.name)}Decoder"
    from_string = f"{lower_first(d.name)}FromString"
    unknown = elm_string(f"Unknown {d.name}: ")
    return [
        f"{fn} : Decode.Decoder {d.name}",
        f"{fn} =",
        f"{_indent(1)}Decode.string",
        f"{_indent(2)}|> Decode.andThen",
        f"{_indent(3)}(\\string ->",
        f"{_indent(4)}case {from_string} string of",
        f"{_indent(5)}Just value ->",
        f"{_indent(6)}Decode.succeed value",
        "",
        f"{_indent(5)}Nothing ->",
        f"{_indent(6)}Decode.fail ({unknown} ++ string)",
        f"{_indent(3)})",
    ]


def _render_encoder(d: EnumDefinition) -> list[str]:
    fn = f"encode{d.name}"
    return [
        f"{fn} : {d.name} -> Encode.Value",
        f"{fn} value =",
        f"{_indent(1)}Encode.string ({lower_first(d.name)}ToString value)",
    ]


def render_module(
    definitions: Sequence[EnumDefinition],
    *,
    module_name: str,
    source_name: str,
) -> str:
    """Render the complete Elm module for ``definitions``.

    Args:
        definitions (Sequence[EnumDefinition]): Parsed declarations, in source order.
        module_name (str): Elm module name (e.g. ``Enums`` or ``Api.Enums``).
        source_name (str): Display name of the definitions file, quoted in the module doc.

    Returns:
        str: Elm source text ending with a single newline.
    """
    header = [
        f"module {module_name} exposing (..)",
        "",
        f"{{-| Types, JSON decoders and encoders generated by elm-enums from {source_name}.",
        "",
        "Do not edit this file by hand: change the definitions and run elm-enums again.",
        "",
        "-}",
        "",
        "import Json.Decode as Decode",
        "import Json.Encode as Encode",
    ]

    blocks: list[list[str]] = [header]
    for d in definitions:
        blocks.extend(
            [
                _render_type(d),
                _render_all(d),
                _render_to_string(d),
                _render_from_string(d),
                _render_decoder(d),
                _render_encoder(d),
            ]
        )
    # elm-format separates top-level declarations with two blank lines
    return "\n\n\n".join("\n".join(block) for block in blocks) + "\n"
