# topmark:header:start
#
#   project      : elm-enums
#   file         : __init__.py
#   file_relpath : src/elm_enums/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, framework-agnostic building blocks shared by the CLI and the API."""

from __future__ import annotations
