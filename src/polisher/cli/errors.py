# topmark:header:start
#
#   project      : Polisher
#   file         : errors.py
#   file_relpath : src/polisher/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Polisher CLI.

Raise these from commands to exit with a standardized message and exit code.
Configuration-layer errors (`polisher.config.types.OptionsError`) are mapped
to `PolisherConfigError` at the command boundary.
"""

from __future__ import annotations

import click

from polisher.cli.exit_codes import ExitCode


class PolisherError(click.ClickException):
    """Base class for all Polisher CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class PolisherUsageError(PolisherError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PolisherConfigError(PolisherError):
    """Error for configuration errors (invalid or out-of-range option values)."""

    exit_code = ExitCode.CONFIG_ERROR
