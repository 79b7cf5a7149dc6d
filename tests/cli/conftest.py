# topmark:header:start
#
#   project      : Polisher
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Polisher in a controlled working directory."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Sequence

import pytest
import tomlkit
from click.testing import CliRunner, Result

from polisher.cli.main import cli
from polisher.config.logging import TRACE_LEVEL, setup_logging
from polisher.constants import TOML_BLOCK_END, TOML_BLOCK_START

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Re-install the test-suite log handler after each CLI invocation.

    The CLI group calls `setup_logging` with a handler bound to the
    `CliRunner` stderr, which is closed once the invocation returns.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["profiles"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, obj={})


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Config discovery starts from the CWD, so this is the helper to use when a
    test drops a ``polisher.toml`` into ``tmp_path``.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv)
    finally:
        os.chdir(cwd)


def extract_toml_block(text: str) -> dict[str, Any]:
    """Parse the TOML printed between the BEGIN/END markers.

    Args:
        text (str): Command output.

    Returns:
        dict[str, Any]: The parsed TOML as plain Python values.
    """
    start: int = text.index(TOML_BLOCK_START) + len(TOML_BLOCK_START)
    end: int = text.index(TOML_BLOCK_END, start)
    return tomlkit.parse(text[start:end]).unwrap()
