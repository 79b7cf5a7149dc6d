# topmark:header:start
#
#   project      : Polisher
#   file         : version.py
#   file_relpath : src/polisher/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Polisher `version` command.

Prints the Polisher version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from polisher.cli.keys import CliCmd
from polisher.constants import POLISHER_VERSION


@click.command(
    name=CliCmd.VERSION,
    help="Show the current version of Polisher.",
)
def version_command() -> None:
    """Show the current version of Polisher."""
    click.echo(POLISHER_VERSION)
