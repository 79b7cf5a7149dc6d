# topmark:header:start
#
#   project      : Polisher
#   file         : __init__.py
#   file_relpath : src/polisher/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic helpers shared by the config and CLI layers."""

from __future__ import annotations
