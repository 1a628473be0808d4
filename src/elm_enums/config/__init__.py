# topmark:header:start
#
#   project      : elm-enums
#   file         : __init__.py
#   file_relpath : src/elm_enums/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for elm-enums: model, TOML loading and logging setup.

Import the model from here (``from elm_enums.config import Config, MutableConfig``).
"""

from __future__ import annotations

from elm_enums.config.io import ConfigLoadError
from elm_enums.config.model import Config, MutableConfig

__all__ = ["Config", "ConfigLoadError", "MutableConfig"]
