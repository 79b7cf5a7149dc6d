# topmark:header:start
#
#   project      : Polisher
#   file         : __init__.py
#   file_relpath : src/polisher/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for the Polisher formatter.

Resolves a requested style profile, sparse per-field overrides (from config
files, the CLI or API callers) and the library defaults into one immutable
`FormatterOptions` object that the formatting engine can trust to be complete.

Public names are re-exported here so callers can write
``from polisher.config import FormatterOptions``.
"""

from __future__ import annotations

from polisher.config.fixes import StyleFix
from polisher.config.indent import DEFAULT_TAB_SIZES, CodeIndent, MutableCodeIndent
from polisher.config.model import FormatterOptions, MutableFormatterOptions, resolve_options
from polisher.config.profiles import DEFAULT_PROFILE, CodeProfile
from polisher.config.style import DEFAULT_STYLE, CodeStyle, MutableCodeStyle
from polisher.config.types import LineEnding, OptionsError

__all__: list[str] = [
    "DEFAULT_PROFILE",
    "DEFAULT_STYLE",
    "DEFAULT_TAB_SIZES",
    "CodeIndent",
    "CodeProfile",
    "CodeStyle",
    "FormatterOptions",
    "LineEnding",
    "MutableCodeIndent",
    "MutableCodeStyle",
    "MutableFormatterOptions",
    "OptionsError",
    "StyleFix",
    "resolve_options",
]
