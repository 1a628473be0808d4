# topmark:header:start
#
#   project      : elm-enums
#   file         : __init__.py
#   file_relpath : src/elm_enums/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""elm-enums CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    elm-enums = "elm_enums.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main at module import time
