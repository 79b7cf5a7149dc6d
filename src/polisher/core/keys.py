# topmark:header:start
#
#   project      : Polisher
#   file         : keys.py
#   file_relpath : src/polisher/core/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared canonical argument keys.

These destination keys are the contract between argument parsing (CLI or API
dicts) and `MutableFormatterOptions.apply_args`.

Notes:
    - Values are Python identifiers (snake_case), not CLI spellings.
    - The CLI spellings live in `polisher.cli.keys`.
    - Keep this module behavior-free so it can be imported from anywhere.
"""

from __future__ import annotations

from typing import Final


class ArgKey:
    """Canonical argument keys used by the Polisher CLI / API."""

    # Profile and page layout
    PROFILE: Final[str] = "profile"
    INDENT: Final[str] = "indent"
    PAGE_WIDTH: Final[str] = "page_width"
    LINE_ENDING: Final[str] = "line_ending"
    INSERT_SPACES: Final[str] = "insert_spaces"
    FIXES: Final[str] = "fixes"

    # Indent widths
    BLOCK_INDENT: Final[str] = "block_indent"
    CASCADE_INDENT: Final[str] = "cascade_indent"
    EXPRESSION_INDENT: Final[str] = "expression_indent"
    CONSTRUCTOR_INITIALIZER_INDENT: Final[str] = "constructor_initializer_indent"

    # Config discovery
    CONFIG_FILES: Final[str] = "config_files"
    NO_CONFIG: Final[str] = "no_config"
    CONFIG_FOR_PYPROJECT: Final[str] = "pyproject"

    # Logging / UX
    VERBOSE: Final[str] = "verbose"
    QUIET: Final[str] = "quiet"
    VERBOSITY_LEVEL: Final[str] = "verbosity_level"
