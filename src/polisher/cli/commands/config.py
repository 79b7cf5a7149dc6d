# topmark:header:start
#
#   project      : Polisher
#   file         : config.py
#   file_relpath : src/polisher/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Polisher `config` command.

Resolves the effective formatter options from the library defaults, the
discovered config file, explicit ``--config`` files and the command-line
overrides, then prints them as TOML. The TOML is wrapped between
``# === BEGIN[TOML] ===`` and ``# === END[TOML] ===`` markers so tests and
tooling can extract it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from click.core import ParameterSource

from polisher.cli.errors import PolisherConfigError
from polisher.cli.keys import CliCmd, CliOpt
from polisher.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatting_options,
    validate_fix_tokens,
    validate_profile_token,
)
from polisher.config.io import nest_toml_under_section, to_toml
from polisher.config.logging import get_logger
from polisher.config.model import MutableFormatterOptions
from polisher.config.types import OptionsError
from polisher.constants import PYPROJECT_TOOL_SECTION, TOML_BLOCK_END, TOML_BLOCK_START
from polisher.core.keys import ArgKey

if TYPE_CHECKING:
    from polisher.config.model import FormatterOptions

logger = get_logger(__name__)


@click.command(
    name=CliCmd.CONFIG,
    help="Print the resolved formatter options as TOML.",
    epilog=(
        "Precedence (lowest to highest): defaults, profile style, discovered "
        "config file, --config files, command-line flags."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_formatting_options
@click.option(
    CliOpt.CONFIG_FOR_PYPROJECT,
    ArgKey.CONFIG_FOR_PYPROJECT,
    is_flag=True,
    help="Nest the output under [tool.polisher] for pasting into pyproject.toml.",
)
def config_command(**params: Any) -> None:
    """Resolve and print the effective formatter options.

    Raises:
        PolisherUsageError: If ``--profile`` or ``--fix`` names nothing known.
        PolisherConfigError: If a resolved value is out of range.
    """
    params[ArgKey.PROFILE] = validate_profile_token(params.get(ArgKey.PROFILE))
    params[ArgKey.FIXES] = validate_fix_tokens(params.get(ArgKey.FIXES) or ())
    # Only an explicit --spaces/--tabs overrides the config files
    ctx: click.Context = click.get_current_context()
    if ctx.get_parameter_source(ArgKey.INSERT_SPACES) is not ParameterSource.COMMANDLINE:
        params[ArgKey.INSERT_SPACES] = None

    draft: MutableFormatterOptions = MutableFormatterOptions.load_merged(
        extra_config_files=[Path(p) for p in params.get(ArgKey.CONFIG_FILES) or ()],
        no_config=bool(params.get(ArgKey.NO_CONFIG)),
    )
    draft.apply_args(params)
    logger.trace("Config layers: %s", draft.config_files)

    try:
        options: FormatterOptions = draft.freeze()
    except OptionsError as exc:
        raise PolisherConfigError(f"Invalid formatter options: {exc}") from exc

    toml_text: str = to_toml(options.to_toml_dict())
    if params.get(ArgKey.CONFIG_FOR_PYPROJECT):
        toml_text = nest_toml_under_section(toml_text, PYPROJECT_TOOL_SECTION)

    click.echo(TOML_BLOCK_START)
    click.echo(toml_text.rstrip("\n"))
    click.echo(TOML_BLOCK_END)
