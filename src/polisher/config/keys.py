# topmark:header:start
#
#   project      : Polisher
#   file         : keys.py
#   file_relpath : src/polisher/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Polisher configuration.

These strings are the external configuration schema as it appears in
``polisher.toml`` and in ``[tool.polisher]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change for saved settings.
CLI keys live separately in `polisher.cli.keys`.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Polisher configuration."""

    # [formatting]
    SECTION_FORMATTING: Final[str] = "formatting"

    KEY_PROFILE: Final[str] = "profile"
    KEY_INDENT: Final[str] = "indent"
    KEY_PAGE_WIDTH: Final[str] = "page_width"
    KEY_LINE_ENDING: Final[str] = "line_ending"
    KEY_INSERT_SPACES: Final[str] = "insert_spaces"
    KEY_FIXES: Final[str] = "fixes"

    # [indent]
    SECTION_INDENT: Final[str] = "indent"

    KEY_BLOCK: Final[str] = "block"
    KEY_CASCADE: Final[str] = "cascade"
    KEY_EXPRESSION: Final[str] = "expression"
    KEY_CONSTRUCTOR_INITIALIZER: Final[str] = "constructor_initializer"

    # [style]
    SECTION_STYLE: Final[str] = "style"

    KEY_OUTER_BRACES_ON_BLOCK_LIKE: Final[str] = "outer_braces_on_block_like"
    KEY_OUTER_BRACES_ON_COLLECTION_LITERALS: Final[str] = "outer_braces_on_collection_literals"
    KEY_OUTER_BRACES_ON_ENUM: Final[str] = "outer_braces_on_enum"
    KEY_OUTER_TRY_CLAUSE_ON_NEWLINE: Final[str] = "outer_try_clause_on_newline"
    KEY_OUTER_IF_ELSE_ON_NEWLINE: Final[str] = "outer_if_else_on_newline"
