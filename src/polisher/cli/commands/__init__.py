# topmark:header:start
#
#   project      : Polisher
#   file         : __init__.py
#   file_relpath : src/polisher/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands registered on the `polisher` Click group."""

from __future__ import annotations
