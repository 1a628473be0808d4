# topmark:header:start
#
#   project      : elm-enums
#   file         : __init__.py
#   file_relpath : src/elm_enums/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""elm-enums package.

elm-enums turns a small text file of enum definitions (``enums.defs``) into an
Elm module (``Enums.elm``) holding the custom types together with their JSON
decoders, encoders and string conversions. It exposes both a CLI and a small
typed API (see [`elm_enums.driver`][]).
"""

from __future__ import annotations
