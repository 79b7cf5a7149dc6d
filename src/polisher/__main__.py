# topmark:header:start
#
#   project      : Polisher
#   file         : __main__.py
#   file_relpath : src/polisher/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point for ``python -m polisher``."""

from __future__ import annotations

from polisher.cli.main import cli

if __name__ == "__main__":
    cli()
