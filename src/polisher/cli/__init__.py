# topmark:header:start
#
#   project      : Polisher
#   file         : __init__.py
#   file_relpath : src/polisher/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for Polisher."""

from __future__ import annotations
