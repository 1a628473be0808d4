# topmark:header:start
#
#   project      : elm-enums
#   file         : __main__.py
#   file_relpath : src/elm_enums/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running elm-enums via ``python -m elm_enums``.

It delegates directly to :func:`elm_enums.cli.main.cli`, so the module form and
the ``elm-enums`` console script share a single entry point.

Examples:
    Convert ``./enums.defs`` into ``./Enums.elm``::

        python -m elm_enums
"""

from __future__ import annotations

from elm_enums.cli.main import cli

if __name__ == "__main__":
    cli()
