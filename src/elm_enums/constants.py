# topmark:header:start
#
#   project      : elm-enums
#   file         : constants.py
#   file_relpath : src/elm_enums/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""elm-enums Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

ELM_ENUMS_VERSION: str = get_version("elm-enums")

DEFAULT_INPUT_NAME: str = "enums.defs"
DEFAULT_OUTPUT_NAME: str = "Enums.elm"
DEFAULT_BACKUP_SUFFIX: str = ".bak"

# Local config discovery (current working directory only)
CONFIG_FILE_NAME: str = "elm-enums.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "elm-enums"

LOG_LEVEL_ENV_VAR: str = "ELM_ENUMS_LOG_LEVEL"
