# topmark:header:start
#
#   project      : elm-enums
#   file         : keys.py
#   file_relpath : src/elm_enums/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for elm-enums configuration.

These keys are the external configuration API as it appears in
``elm-enums.toml`` and in ``[tool.elm-enums]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by elm-enums configuration (single flat table)."""

    KEY_INPUT: Final[str] = "input"
    KEY_OUTPUT: Final[str] = "output"
    KEY_BACKUP: Final[str] = "backup"
    KEY_BACKUP_SUFFIX: Final[str] = "backup_suffix"
    KEY_MODULE_NAME: Final[str] = "module_name"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_INPUT, KEY_OUTPUT, KEY_BACKUP, KEY_BACKUP_SUFFIX, KEY_MODULE_NAME}
    )
