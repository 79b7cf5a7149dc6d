# topmark:header:start
#
#   project      : Polisher
#   file         : constants.py
#   file_relpath : src/polisher/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Polisher Constants.

Scalar defaults shared by the configuration layer. Composite defaults (the
default `CodeStyle`, the default `CodeIndent`) are built from these values in
their own modules.
"""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

POLISHER_VERSION: str = get_version("polisher")

# Config file names looked up during discovery:
POLISHER_TOML_NAME: Final[str] = "polisher.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "tool.polisher"

# Page-level defaults
DEFAULT_INDENT: Final[int] = 0
DEFAULT_PAGE_WIDTH: Final[int] = 80
DEFAULT_INSERT_SPACES: Final[bool] = True

# Nesting indent widths (in columns)
DEFAULT_BLOCK_INDENT: Final[int] = 2
DEFAULT_CASCADE_INDENT: Final[int] = 2
DEFAULT_EXPRESSION_INDENT: Final[int] = 4
DEFAULT_CONSTRUCTOR_INITIALIZER_INDENT: Final[int] = 4

TOML_BLOCK_START: Final[str] = "# === BEGIN[TOML] ==="
TOML_BLOCK_END: Final[str] = "# === END[TOML] ==="
