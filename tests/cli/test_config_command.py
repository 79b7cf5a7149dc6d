# topmark:header:start
#
#   project      : Polisher
#   file         : test_config_command.py
#   file_relpath : tests/cli/test_config_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `polisher config`: resolution order, TOML output and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from polisher.cli.exit_codes import ExitCode
from polisher.constants import TOML_BLOCK_END, TOML_BLOCK_START
from tests.cli.conftest import extract_toml_block, run_cli_in
from tests.conftest import mark_cli, parametrize, write_toml

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_config_defaults(isolation: Path) -> None:
    """Without config files or flags the defaults are printed."""
    result: Result = run_cli_in(isolation, ["config", "--no-config"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert TOML_BLOCK_START in result.stdout
    assert TOML_BLOCK_END in result.stdout

    data: dict[str, Any] = extract_toml_block(result.stdout)
    assert data["formatting"] == {
        "indent": 0,
        "page_width": 80,
        "insert_spaces": True,
        "fixes": [],
    }
    assert data["indent"] == {
        "block": 2,
        "cascade": 2,
        "expression": 4,
        "constructor_initializer": 4,
    }
    assert not any(data["style"].values())


@mark_cli
def test_config_flags(isolation: Path) -> None:
    """Formatting flags override the defaults."""
    result: Result = run_cli_in(
        isolation,
        [
            "config",
            "--no-config",
            "--profile",
            "Expanded",
            "--page-width",
            "120",
            "--line-ending",
            "CRLF",
            "--tabs",
            "--fix",
            "optional-new",
            "--fix",
            "doc-comments",
            "--block-indent",
            "4",
            "--constructor-initializer-indent",
            "6",
        ],
    )
    assert result.exit_code == ExitCode.SUCCESS, result.output

    data: dict[str, Any] = extract_toml_block(result.stdout)
    formatting: dict[str, Any] = data["formatting"]
    assert formatting["page_width"] == 120
    assert formatting["line_ending"] == "crlf"
    assert formatting["insert_spaces"] is False
    assert formatting["fixes"] == ["doc-comments", "optional-new"]
    assert data["indent"]["block"] == 4
    assert data["indent"]["constructor_initializer"] == 6
    assert data["style"]["outer_braces_on_block_like"] is True
    assert data["style"]["outer_braces_on_collection_literals"] is False


@mark_cli
def test_config_profile_by_code(isolation: Path) -> None:
    """``--profile`` accepts the numeric code."""
    result: Result = run_cli_in(isolation, ["config", "--no-config", "--profile", "1"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert extract_toml_block(result.stdout)["style"]["outer_try_clause_on_newline"] is True


@mark_cli
def test_config_discovers_file_and_flags_win(isolation: Path) -> None:
    """The discovered polisher.toml applies; command-line flags override it."""
    write_toml(
        isolation / "polisher.toml",
        "[formatting]\npage_width = 100\nindent = 2\n\n[style]\nouter_braces_on_enum = true\n",
    )
    result: Result = run_cli_in(isolation, ["config", "--page-width", "60"])
    assert result.exit_code == ExitCode.SUCCESS, result.output

    data: dict[str, Any] = extract_toml_block(result.stdout)
    assert data["formatting"]["page_width"] == 60
    assert data["formatting"]["indent"] == 2
    assert data["style"]["outer_braces_on_enum"] is True


@mark_cli
def test_config_no_config_ignores_discovered_file(isolation: Path) -> None:
    """``--no-config`` skips discovery, ``--config`` files still apply."""
    write_toml(isolation / "polisher.toml", "[formatting]\nindent = 2\n")
    extra: Path = write_toml(isolation / "extra.toml", "[indent]\ncascade = 6\n")
    result: Result = run_cli_in(isolation, ["config", "--no-config", "--config", str(extra)])
    assert result.exit_code == ExitCode.SUCCESS, result.output

    data: dict[str, Any] = extract_toml_block(result.stdout)
    assert data["formatting"]["indent"] == 0
    assert data["indent"]["cascade"] == 6


@mark_cli
def test_config_pyproject_output(isolation: Path) -> None:
    """``--pyproject`` nests the output under [tool.polisher]."""
    result: Result = run_cli_in(isolation, ["config", "--no-config", "--pyproject"])
    assert result.exit_code == ExitCode.SUCCESS, result.output

    data: dict[str, Any] = extract_toml_block(result.stdout)
    assert data["tool"]["polisher"]["formatting"]["page_width"] == 80


@mark_cli
def test_config_output_reloads_as_config_file(isolation: Path) -> None:
    """The printed TOML is a valid polisher.toml producing the same options."""
    first: Result = run_cli_in(
        isolation, ["config", "--no-config", "--profile", "expanded", "--indent", "2"]
    )
    assert first.exit_code == ExitCode.SUCCESS, first.output
    dumped: dict[str, Any] = extract_toml_block(first.stdout)

    saved: Path = write_toml(isolation / "saved.toml", tomlkit.dumps(dumped))
    second: Result = run_cli_in(isolation, ["config", "--no-config", "--config", str(saved)])
    assert second.exit_code == ExitCode.SUCCESS, second.output
    assert extract_toml_block(second.stdout) == dumped


@mark_cli
@parametrize(
    "argv",
    [
        ["--page-width", "0"],
        ["--indent", "-1"],
        ["--block-indent", "-2"],
    ],
)
def test_config_invalid_values_exit_config_error(isolation: Path, argv: list[str]) -> None:
    """Out-of-range values exit with CONFIG_ERROR."""
    result: Result = run_cli_in(isolation, ["config", "--no-config", *argv])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Invalid formatter options" in result.output


@mark_cli
def test_config_invalid_file_value_exit_config_error(isolation: Path) -> None:
    """A bad value from a config file is reported the same way."""
    write_toml(isolation / "polisher.toml", "[formatting]\npage_width = 0\n")
    result: Result = run_cli_in(isolation, ["config"])
    assert result.exit_code == ExitCode.CONFIG_ERROR


@mark_cli
@parametrize(
    "argv, needle",
    [
        (["--profile", "compact"], "Unknown profile"),
        (["--profile", "7"], "Unknown profile"),
        (["--fix", "bogus"], "Unknown style fix"),
    ],
)
def test_config_unknown_tokens_exit_usage_error(
    isolation: Path, argv: list[str], needle: str
) -> None:
    """Unknown profile or fix names on the command line are usage errors."""
    result: Result = run_cli_in(isolation, ["config", "--no-config", *argv])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert needle in result.output


@mark_cli
def test_config_unknown_profile_in_file_falls_back(isolation: Path) -> None:
    """In a config file an unknown profile falls back to the default profile."""
    write_toml(isolation / "polisher.toml", '[formatting]\nprofile = "compact"\n')
    result: Result = run_cli_in(isolation, ["config"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert not any(extract_toml_block(result.stdout)["style"].values())
