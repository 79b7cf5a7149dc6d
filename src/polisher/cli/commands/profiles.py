# topmark:header:start
#
#   project      : Polisher
#   file         : profiles.py
#   file_relpath : src/polisher/cli/commands/profiles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Polisher `profiles` command: list the available style profiles."""

from __future__ import annotations

import click

from polisher.cli.keys import CliCmd
from polisher.config.profiles import CodeProfile


@click.command(
    name=CliCmd.PROFILES,
    help="List the available style profiles.",
)
def profiles_command() -> None:
    """Print one line per profile: code, name and description.

    The default profile is marked with ``*``.
    """
    default: CodeProfile = CodeProfile.default()
    width: int = max(len(p.label) for p in CodeProfile)
    for profile in CodeProfile:
        marker: str = "*" if profile is default else " "
        click.echo(f"{marker} {profile.code:>2}  {profile.label:<{width}}  {profile.description}")
