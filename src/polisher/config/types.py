# topmark:header:start
#
#   project      : Polisher
#   file         : types.py
#   file_relpath : src/polisher/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API argument dicts.
    - `OptionsError`: raised when a configuration value is out of range.
    - `LineEnding`: the newline sequences the formatter may emit.
"""

from __future__ import annotations

# For runtime type checks, prefer collections.abc
from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class OptionsError(ValueError):
    """A formatter option holds a value the formatting engine cannot use.

    Raised at construction time (never later) so that invalid widths or line
    endings do not reach the formatting engine.
    """


class LineEnding(str, Enum):
    """Newline sequences accepted by `FormatterOptions.line_ending`.

    The member name (lowercased) is the token used in TOML and on the CLI;
    the value is the newline string itself.
    """

    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"

    @property
    def token(self) -> str:
        """Config-friendly token for this line ending (``"lf"``, ``"crlf"``, ``"cr"``)."""
        return self.name.lower()

    @classmethod
    def from_name(cls, key_name: str | None) -> LineEnding | None:
        """Find the member by its case-insensitive token (e.g. ``"crlf"``).

        Args:
            key_name (str | None): The token, or None.

        Returns:
            LineEnding | None: The matching member or None if unmatched or not a str.
        """
        if not isinstance(key_name, str):
            return None
        return cls.__members__.get(key_name.strip().upper())

    @classmethod
    def from_value(cls, value: str | None) -> LineEnding | None:
        """Find the member whose newline string equals ``value``.

        Args:
            value (str | None): A newline string such as ``"\\r\\n"``.

        Returns:
            LineEnding | None: The matching member or None if unmatched.
        """
        for member in cls:
            if member.value == value:
                return member
        return None
