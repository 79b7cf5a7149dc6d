# topmark:header:start
#
#   project      : Polisher
#   file         : main.py
#   file_relpath : src/polisher/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for Polisher.

Group-level options are resolved once and stored in ``ctx.obj`` so the
subcommands can read them.
"""

from __future__ import annotations

import click

from polisher.cli.commands.config import config_command
from polisher.cli.commands.profiles import profiles_command
from polisher.cli.commands.version import version_command
from polisher.cli.options import CONTEXT_SETTINGS, common_verbose_options, resolve_verbosity
from polisher.config.logging import get_logger, resolve_env_log_level, setup_logging
from polisher.core.keys import ArgKey

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize logging and store the verbosity on the Click context.

    ``POLISHER_LOG_LEVEL`` takes precedence over ``-v``/``-q``.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj[ArgKey.VERBOSITY_LEVEL] = level_cli

    level_env: int | None = resolve_env_log_level()
    setup_logging(level=level_env if level_env is not None else level_cli)
    logger.debug("Log level: env=%s cli=%s", level_env, level_cli)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Polisher: resolve and inspect formatter options.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the Polisher CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(profiles_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
