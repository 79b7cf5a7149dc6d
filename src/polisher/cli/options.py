# topmark:header:start
#
#   project      : Polisher
#   file         : options.py
#   file_relpath : src/polisher/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based Polisher CLI.

This module centralizes reusable option groups (verbosity, config discovery,
formatter overrides) and their resolution logic so commands can stay thin.
Option destinations are the `ArgKey` values consumed by
`MutableFormatterOptions.apply_args`.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from polisher.cli.errors import PolisherUsageError
from polisher.cli.keys import CliOpt
from polisher.config.fixes import StyleFix
from polisher.config.logging import TRACE_LEVEL, get_logger
from polisher.config.profiles import CodeProfile
from polisher.config.types import LineEnding
from polisher.core.keys import ArgKey

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        The logging level as an integer.

    Raises:
        PolisherUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more -v flags set TRACE, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PolisherUsageError(
            f"The '{CliOpt.VERBOSE}' and '{CliOpt.QUIET}' options are mutually exclusive."
        )

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "-v",
        CliOpt.VERBOSE,
        ArgKey.VERBOSE,
        count=True,
        help="Increase log verbosity (repeat up to three times for TRACE).",
    )(f)
    f = click.option(
        "-q",
        CliOpt.QUIET,
        ArgKey.QUIET,
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        CliOpt.NO_CONFIG,
        ArgKey.NO_CONFIG,
        is_flag=True,
        help="Do not discover polisher.toml / pyproject.toml (explicit --config files still apply).",
    )(f)
    f = click.option(
        CliOpt.CONFIG_PATHS,
        ArgKey.CONFIG_FILES,
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge, in order.",
    )(f)
    return f


def common_formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the formatter override options.

    Profile and fix tokens are validated by the command (see
    `validate_profile_token` and `validate_fix_tokens`) so that aliases and
    numeric profile codes are accepted.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        CliOpt.PROFILE,
        ArgKey.PROFILE,
        metavar="NAME|CODE",
        help=f"Style profile ({', '.join(p.label for p in CodeProfile)}) or its code.",
    )(f)
    f = click.option(
        CliOpt.INDENT,
        ArgKey.INDENT,
        type=int,
        help="Columns of padding prefixed to every output line.",
    )(f)
    f = click.option(
        CliOpt.PAGE_WIDTH,
        ArgKey.PAGE_WIDTH,
        type=int,
        help="Number of columns the output should fit within.",
    )(f)
    f = click.option(
        CliOpt.LINE_ENDING,
        ArgKey.LINE_ENDING,
        type=click.Choice([m.token for m in LineEnding], case_sensitive=False),
        help="Newline sequence to emit (inferred from the input when omitted).",
    )(f)
    f = click.option(
        CliOpt.INSERT_SPACES,
        ArgKey.INSERT_SPACES,
        default=None,
        help="Indent with spaces or with tabs.",
    )(f)
    f = click.option(
        CliOpt.FIX,
        ArgKey.FIXES,
        multiple=True,
        metavar="FIX",
        help=f"Style fix to apply; repeatable ({', '.join(fix.key for fix in StyleFix)}).",
    )(f)
    f = click.option(
        CliOpt.BLOCK_INDENT,
        ArgKey.BLOCK_INDENT,
        type=int,
        help="Indent of a block or collection body.",
    )(f)
    f = click.option(
        CliOpt.CASCADE_INDENT,
        ArgKey.CASCADE_INDENT,
        type=int,
        help="Indent of wrapped cascade sections.",
    )(f)
    f = click.option(
        CliOpt.EXPRESSION_INDENT,
        ArgKey.EXPRESSION_INDENT,
        type=int,
        help="Indent of one level of expression nesting.",
    )(f)
    f = click.option(
        CliOpt.CONSTRUCTOR_INITIALIZER_INDENT,
        ArgKey.CONSTRUCTOR_INITIALIZER_INDENT,
        type=int,
        help="Indent of the ':' on a wrapped constructor initializer list.",
    )(f)
    return f


def validate_profile_token(raw: str | None) -> CodeProfile | None:
    """Parse ``--profile`` strictly.

    Config files fall back to the default profile on unknown names; on the
    command line an unknown name is a usage error.

    Raises:
        PolisherUsageError: If ``raw`` names no profile.
    """
    if raw is None:
        return None
    profile: CodeProfile | None = CodeProfile.parse(raw)
    if profile is None:
        valid: str = ", ".join(f"{p.code} ({p.label})" for p in CodeProfile)
        raise PolisherUsageError(f"Unknown profile {raw!r}. Valid profiles: {valid}")
    return profile


def validate_fix_tokens(raw: tuple[str, ...] | list[str]) -> list[StyleFix]:
    """Parse repeated ``--fix`` values strictly.

    Raises:
        PolisherUsageError: If any value names no style fix.
    """
    fixes: list[StyleFix] = []
    for token in raw:
        fix: StyleFix | None = StyleFix.parse(token)
        if fix is None:
            valid: str = ", ".join(f.key for f in StyleFix)
            raise PolisherUsageError(f"Unknown style fix {token!r}. Valid fixes: {valid}")
        fixes.append(fix)
    return fixes
