# topmark:header:start
#
#   project      : elm-enums
#   file         : model.py
#   file_relpath : src/elm_enums/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the conversion driver.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      is frozen into `Config` once all sources are merged.

Precedence (last wins):
    built-in defaults < discovered config file < explicit ``--config`` files < CLI options.

Path semantics:
    - ``input`` / ``output`` declared in a config file are resolved against that
      config file's directory.
    - CLI paths are kept as given, i.e. relative to the invocation CWD.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from elm_enums.config.io import (
    ConfigLoadError,
    extract_tool_table,
    get_bool_value_or_none,
    get_string_value_or_none,
    load_toml_dict,
)
from elm_enums.config.keys import Toml
from elm_enums.config.logging import get_logger
from elm_enums.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_BACKUP_SUFFIX,
    DEFAULT_INPUT_NAME,
    DEFAULT_OUTPUT_NAME,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from elm_enums.config.io import TomlTable
    from elm_enums.config.logging import ElmEnumsLogger

logger: ElmEnumsLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for a conversion run.

    Attributes:
        input_path (Path): Definitions file to read.
        output_path (Path): Elm module to write.
        backup (bool): Whether an existing output is moved to `backup_path` first.
        backup_suffix (str): Suffix appended to the output file name for the backup.
        module_name (str | None): Explicit Elm module name; ``None`` derives it from
            the output file stem.
        verbosity_level (int): 0 = default, < 0 = quiet, > 0 = verbose.
        config_files (tuple[Path, ...]): Config sources that contributed, in merge order.
    """

    input_path: Path
    output_path: Path
    backup: bool
    backup_suffix: str
    module_name: str | None
    verbosity_level: int
    config_files: tuple[Path, ...]

    @property
    def backup_path(self) -> Path:
        """Where the previous output is moved (``Enums.elm`` -> ``Enums.elm.bak``)."""
        return self.output_path.with_name(self.output_path.name + self.backup_suffix)

    @property
    def effective_module_name(self) -> str:
        """Elm module name: explicit `module_name` or the output file stem."""
        return self.module_name or self.output_path.stem


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Unset fields are ``None`` so that `merge_with` can tell "not configured"
    apart from an explicit value; `freeze` fills in the built-in defaults.
    """

    input_path: Path | None = None
    output_path: Path | None = None
    backup: bool | None = None
    backup_suffix: str | None = None
    module_name: str | None = None
    verbosity_level: int | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            input_path=self.input_path or Path(DEFAULT_INPUT_NAME),
            output_path=self.output_path or Path(DEFAULT_OUTPUT_NAME),
            backup=True if self.backup is None else self.backup,
            backup_suffix=self.backup_suffix or DEFAULT_BACKUP_SUFFIX,
            module_name=self.module_name or None,
            verbosity_level=self.verbosity_level or 0,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            input_path=Path(DEFAULT_INPUT_NAME),
            output_path=Path(DEFAULT_OUTPUT_NAME),
            backup=True,
            backup_suffix=DEFAULT_BACKUP_SUFFIX,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML table.

        Args:
            data (TomlTable): The elm-enums table.
            config_file (Path | None): Source file; relative paths resolve against its directory.

        Returns:
            MutableConfig: The resulting draft.

        Raises:
            ConfigLoadError: If a value has the wrong type or an empty backup suffix.
        """
        for key in sorted(set(data) - Toml.ALL_KEYS):
            logger.warning("Ignoring unknown config key '%s' in %s", key, config_file or "<dict>")

        cfg_dir: Path | None = config_file.parent if config_file else None

        def _path(key: str) -> Path | None:
            raw = get_string_value_or_none(data, key, source=config_file)
            if raw is None:
                return None
            p = Path(raw)
            if cfg_dir is not None and not p.is_absolute():
                p = cfg_dir / p
            logger.trace("Config %s = %s", key, p)
            return p

        suffix = get_string_value_or_none(data, Toml.KEY_BACKUP_SUFFIX, source=config_file)
        if suffix is not None and not suffix:
            raise ConfigLoadError(
                f"'{Toml.KEY_BACKUP_SUFFIX}' must not be empty"
                + (f" (in {config_file})" if config_file else "")
            )

        return cls(
            input_path=_path(Toml.KEY_INPUT),
            output_path=_path(Toml.KEY_OUTPUT),
            backup=get_bool_value_or_none(data, Toml.KEY_BACKUP, source=config_file),
            backup_suffix=suffix,
            module_name=get_string_value_or_none(data, Toml.KEY_MODULE_NAME, source=config_file),
            config_files=[config_file] if config_file else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path, *, discovered: bool = False) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``elm-enums.toml`` and ``pyproject.toml`` (``[tool.elm-enums]``).

        Args:
            path (Path): The TOML file.
            discovered (bool): ``path`` was found in the CWD rather than named by the
                user. An unreadable or unparsable discovered ``pyproject.toml`` is
                skipped with a warning instead of failing the run.

        Returns:
            MutableConfig | None: The draft, or ``None`` for a ``pyproject.toml``
                without an elm-enums section (or a skipped one).

        Raises:
            ConfigLoadError: If the file cannot be loaded, or its elm-enums table
                holds invalid values.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        try:
            data = load_toml_dict(path)
        except ConfigLoadError as e:
            if not (discovered and path.name == PYPROJECT_FILE_NAME):
                raise
            # pyproject.toml may belong to another tool only
            logger.warning("Skipping %s: %s", path, e)
            return None
        table = extract_tool_table(data, path)
        if table is None:
            logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def discover_local_config_file(cls, cwd: Path) -> Path | None:
        """Return the config file to use from ``cwd``, if any.

        ``elm-enums.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` is
        only returned when it exists (its section is checked at load time).
        """
        for name in (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME):
            candidate = cwd / name
            if candidate.is_file():
                logger.debug("Discovered config candidate %s", candidate)
                return candidate
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Build a draft from defaults, the discovered file and explicit files.

        Args:
            cwd (Path): Directory searched for a local config file.
            extra_config_files (Iterable[Path]): Files passed via ``--config``; applied last.
            no_config (bool): Skip discovery (explicit files still apply).

        Returns:
            MutableConfig: The merged draft (CLI overrides not yet applied).
        """
        draft = cls.from_defaults()
        if not no_config:
            local = cls.discover_local_config_file(cwd)
            if local is not None:
                mc = cls.from_toml_file(local, discovered=True)
                if mc is not None:
                    draft = draft.merge_with(mc)
        for extra in extra_config_files:
            mc = cls.from_toml_file(extra)
            if mc is not None:
                draft = draft.merge_with(mc)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            input_path=other.input_path if other.input_path is not None else self.input_path,
            output_path=other.output_path if other.output_path is not None else self.output_path,
            backup=other.backup if other.backup is not None else self.backup,
            backup_suffix=other.backup_suffix
            if other.backup_suffix is not None
            else self.backup_suffix,
            module_name=other.module_name if other.module_name is not None else self.module_name,
            verbosity_level=other.verbosity_level
            if other.verbosity_level is not None
            else self.verbosity_level,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply CLI (or API) overrides; keys holding ``None`` are ignored.

        Recognized keys: ``input``, ``output``, ``backup``, ``module_name``,
        ``verbosity_level``.
        """
        if args.get("input") is not None:
            self.input_path = Path(args["input"])
        if args.get("output") is not None:
            self.output_path = Path(args["output"])
        if args.get("backup") is not None:
            self.backup = bool(args["backup"])
        if args.get("module_name") is not None:
            self.module_name = str(args["module_name"])
        if args.get("verbosity_level") is not None:
            self.verbosity_level = int(args["verbosity_level"])
        return self
