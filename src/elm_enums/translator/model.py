# topmark:header:start
#
#   project      : elm-enums
#   file         : model.py
#   file_relpath : src/elm_enums/translator/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parsed representation of an enum definitions file."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EnumVariant:
    """One constructor of an enum type.

    Attributes:
        name (str): Elm constructor name (capitalized identifier).
        wire_value (str): String used in JSON (defaults to ``name``).
        line (int): 1-based source line of the constructor name.
        column (int): 1-based source column of the constructor name.
    """

    name: str
    wire_value: str
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class EnumDefinition:
    """A ``type Name = A | B ...`` declaration.

    Attributes:
        name (str): Elm type name (capitalized identifier).
        variants (tuple[EnumVariant, ...]): Constructors in declaration order.
        line (int): 1-based source line of the type name.
        column (int): 1-based source column of the type name.
    """

    name: str
    variants: tuple[EnumVariant, ...]
    line: int
    column: int

    @property
    def variant_names(self) -> tuple[str, ...]:
        """Constructor names in declaration order."""
        return tuple(v.name for v in self.variants)
