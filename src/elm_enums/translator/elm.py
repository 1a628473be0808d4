# topmark:header:start
#
#   project      : elm-enums
#   file         : elm.py
#   file_relpath : src/elm_enums/translator/elm.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundled translator: enum definitions to an Elm module."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from elm_enums.config.logging import get_logger
from elm_enums.translator.codegen import render_module
from elm_enums.translator.contracts import TranslationFailure, TranslationSuccess
from elm_enums.translator.errors import DefinitionError
from elm_enums.translator.parser import parse_definitions

if TYPE_CHECKING:
    from elm_enums.config.logging import ElmEnumsLogger
    from elm_enums.translator.contracts import TranslationResult

logger: ElmEnumsLogger = get_logger(__name__)

MODULE_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[A-Z][A-Za-z0-9_]*(\.[A-Z][A-Za-z0-9_]*)*")


def is_valid_module_name(name: str) -> bool:
    """Return True if ``name`` is a valid (possibly dotted) Elm module name."""
    return MODULE_NAME_RE.fullmatch(name) is not None


class ElmTranslator:
    """Translate enum definitions into an Elm module.

    Args:
        module_name (str): Name of the generated Elm module.
        source_name (str): Display name of the definitions file, quoted in the module doc.

    Raises:
        ValueError: If ``module_name`` is not a valid Elm module name.
    """

    def __init__(self, *, module_name: str = "Enums", source_name: str = "./enums.defs") -> None:
        if not is_valid_module_name(module_name):
            raise ValueError(f"invalid Elm module name: {module_name!r}")
        self.module_name = module_name
        self.source_name = source_name

    def translate(self, source: str) -> TranslationResult:
        """Parse ``source`` and render the Elm module.

        Args:
            source (str): The definitions text.

        Returns:
            TranslationResult: `TranslationSuccess` with the module text, or
            `TranslationFailure` describing the first syntax error.
        """
        try:
            definitions = parse_definitions(source)
        except DefinitionError as exc:
            logger.debug("Definitions rejected: %s", exc)
            return TranslationFailure(error=str(exc))

        generated = render_module(
            definitions, module_name=self.module_name, source_name=self.source_name
        )
        logger.info(
            "Rendered %d types (%d constructors) into module %s",
            len(definitions),
            sum(len(d.variants) for d in definitions),
            self.module_name,
        )
        return TranslationSuccess(generated=generated)
