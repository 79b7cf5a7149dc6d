# topmark:header:start
#
#   project      : Polisher
#   file         : __init__.py
#   file_relpath : src/polisher/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Polisher package.

Polisher holds the configuration layer of a source-code formatter: style
profiles, structural style toggles, indentation widths and the immutable
`FormatterOptions` object handed to the formatting engine. It exposes a small
typed API and a CLI to inspect resolved options.
"""

from __future__ import annotations
