# topmark:header:start
#
#   project      : elm-enums
#   file         : contracts.py
#   file_relpath : src/elm_enums/translator/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Translator contract: definitions text in, tagged result out.

The conversion driver only ever talks to a translator through this contract.
Any object with a ``translate(source: str) -> TranslationResult`` method
qualifies; the bundled implementation is
[`elm_enums.translator.elm.ElmTranslator`][].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union


@dataclass(frozen=True, slots=True)
class TranslationSuccess:
    """Generated source text for a successfully translated request."""

    generated: str


@dataclass(frozen=True, slots=True)
class TranslationFailure:
    """Human-readable description of why the request was rejected."""

    error: str


TranslationResult = Union[TranslationSuccess, TranslationFailure]


class Translator(Protocol):
    """Text-to-text translator with a tagged success/failure result."""

    def translate(self, source: str) -> TranslationResult:
        """Translate ``source`` into generated text or a failure description."""
        ...
