# topmark:header:start
#
#   project      : Polisher
#   file         : keys.py
#   file_relpath : src/polisher/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical CLI command names and option spellings for Polisher.

Option destinations (``dest``) are the `polisher.core.keys.ArgKey` values, so
the parsed Click parameters can be handed to
`MutableFormatterOptions.apply_args` unchanged.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the Polisher CLI."""

    CONFIG: Final[str] = "config"
    PROFILES: Final[str] = "profiles"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings (including the leading ``--``)."""

    # Profile and page layout
    PROFILE: Final[str] = "--profile"
    INDENT: Final[str] = "--indent"
    PAGE_WIDTH: Final[str] = "--page-width"
    LINE_ENDING: Final[str] = "--line-ending"
    INSERT_SPACES: Final[str] = "--spaces/--tabs"
    FIX: Final[str] = "--fix"

    # Indent widths
    BLOCK_INDENT: Final[str] = "--block-indent"
    CASCADE_INDENT: Final[str] = "--cascade-indent"
    EXPRESSION_INDENT: Final[str] = "--expression-indent"
    CONSTRUCTOR_INITIALIZER_INDENT: Final[str] = "--constructor-initializer-indent"

    # Config discovery
    CONFIG_PATHS: Final[str] = "--config"
    NO_CONFIG: Final[str] = "--no-config"
    CONFIG_FOR_PYPROJECT: Final[str] = "--pyproject"

    # Logging / UX
    VERBOSE: Final[str] = "--verbose"
    QUIET: Final[str] = "--quiet"
