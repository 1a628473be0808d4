# topmark:header:start
#
#   project      : elm-enums
#   file         : main.py
#   file_relpath : src/elm_enums/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``elm-enums`` command.

Run without arguments, it reads ``./enums.defs`` and writes ``./Enums.elm``
(keeping the previous version as ``./Enums.elm.bak``). Options and config files
only override those defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from elm_enums.cli.console import ClickConsole
from elm_enums.cli.errors import ConfigError, ElmEnumsError, ElmEnumsUsageError
from elm_enums.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
    validate_module_name,
)
from elm_enums.config import ConfigLoadError, MutableConfig
from elm_enums.config.logging import get_logger, resolve_env_log_level, setup_logging
from elm_enums.constants import ELM_ENUMS_VERSION
from elm_enums.core.exit_codes import ExitCode
from elm_enums.driver import run_conversion
from elm_enums.translator.elm import is_valid_module_name

if TYPE_CHECKING:
    from elm_enums.config import Config

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    setup_logging(level=resolve_env_log_level())


def build_config(
    *,
    input_path: str | None,
    output_path: str | None,
    module_name: str | None,
    no_backup: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
    verbosity_level: int,
) -> Config:
    """Merge defaults, config files and CLI overrides into a frozen `Config`.

    Raises:
        ConfigError: If a config file is malformed or holds a value of the wrong type.
        ElmEnumsUsageError: If no valid Elm module name can be derived.
    """
    try:
        draft = MutableConfig.load_merged(
            cwd=Path.cwd(),
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigLoadError as e:
        raise ConfigError(f"Configuration error: {e}") from e

    draft.apply_cli_args(
        {
            "input": input_path,
            "output": output_path,
            "module_name": module_name,
            "backup": False if no_backup else None,
            "verbosity_level": verbosity_level,
        }
    )
    config = draft.freeze()
    logger.debug("Effective config: %s", config)

    if not is_valid_module_name(config.effective_module_name):
        if config.module_name is not None:
            raise ConfigError(
                f"Configuration error: {config.module_name!r} is not a valid Elm module name"
            )
        raise ElmEnumsUsageError(
            f"Cannot derive an Elm module name from output file '{config.output_path.name}'; "
            "pass --module NAME."
        )
    return config


@click.command(
    name="elm-enums",
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Generate Elm types, JSON decoders and encoders from ./enums.defs into ./Enums.elm. "
        "An existing ./Enums.elm is kept as ./Enums.elm.bak."
    ),
)
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(dir_okay=True, path_type=str),
    default=None,
    help="Definitions file to read (default: enums.defs).",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help="Elm module to write (default: Enums.elm).",
)
@click.option(
    "--module",
    "module_name",
    default=None,
    callback=validate_module_name,
    help="Elm module name (default: output file name without extension).",
)
@click.option(
    "--no-backup",
    is_flag=True,
    help="Overwrite an existing output without keeping a .bak copy.",
)
@common_config_options
@common_verbose_options
@common_color_options
@click.version_option(ELM_ENUMS_VERSION, "--version", prog_name="elm-enums")
@click.pass_context
def cli(
    ctx: click.Context,
    input_path: str | None,
    output_path: str | None,
    module_name: str | None,
    no_backup: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the elm-enums CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]
    try:
        config = build_config(
            input_path=input_path,
            output_path=output_path,
            module_name=module_name,
            no_backup=no_backup,
            config_paths=config_paths,
            no_config=no_config,
            verbosity_level=ctx.obj["verbosity_level"],
        )
        run_conversion(config, console=console)
    except ElmEnumsError as exc:
        # Click renders the error after this context is popped
        exc.console = console
        raise
    ctx.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
