# topmark:header:start
#
#   project      : elm-enums
#   file         : __init__.py
#   file_relpath : src/elm_enums/translator/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Translation of enum definitions into generated source.

The driver depends only on [`elm_enums.translator.contracts`][] and
[`elm_enums.translator.channel`][]; the Elm-specific lexer, parser and
renderer sit behind [`elm_enums.translator.elm.ElmTranslator`][].
"""

from __future__ import annotations

from elm_enums.translator.channel import ChannelError, TranslationChannel
from elm_enums.translator.contracts import (
    TranslationFailure,
    TranslationResult,
    TranslationSuccess,
    Translator,
)
from elm_enums.translator.elm import ElmTranslator

__all__ = [
    "ChannelError",
    "ElmTranslator",
    "TranslationChannel",
    "TranslationFailure",
    "TranslationResult",
    "TranslationSuccess",
    "Translator",
]
