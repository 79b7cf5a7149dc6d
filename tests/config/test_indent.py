# topmark:header:start
#
#   project      : Polisher
#   file         : test_indent.py
#   file_relpath : tests/config/test_indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `CodeIndent` construction and validation."""

from __future__ import annotations

from typing import Any

import pytest

from polisher.config.indent import DEFAULT_TAB_SIZES, CodeIndent, MutableCodeIndent
from polisher.config.types import OptionsError
from polisher.constants import (
    DEFAULT_BLOCK_INDENT,
    DEFAULT_CASCADE_INDENT,
    DEFAULT_CONSTRUCTOR_INITIALIZER_INDENT,
    DEFAULT_EXPRESSION_INDENT,
)
from tests.conftest import mark_config, parametrize


@mark_config
def test_defaults() -> None:
    """Default widths are block 2, cascade 2, expression 4, initializer 4."""
    assert DEFAULT_TAB_SIZES == CodeIndent(2, 2, 4, 4)


@mark_config
def test_opt_all_none_equals_total() -> None:
    """``opt(None, None, None, None)`` equals ``total()`` field by field."""
    assert CodeIndent.opt(None, None, None, None) == CodeIndent.total()
    assert CodeIndent.opt() == DEFAULT_TAB_SIZES


@mark_config
def test_total_with_block_only() -> None:
    """Omitted widths take the library defaults."""
    indent: CodeIndent = CodeIndent.total(block=4)
    assert indent.block == 4
    assert indent.cascade == DEFAULT_CASCADE_INDENT
    assert indent.expression == DEFAULT_EXPRESSION_INDENT
    assert indent.constructor_initializer == DEFAULT_CONSTRUCTOR_INITIALIZER_INDENT


@mark_config
@parametrize(
    "kwargs",
    [
        {"block": 8},
        {"cascade": 0},
        {"expression": 6, "constructor_initializer": 2},
        {"block": 1, "cascade": 1, "expression": 1, "constructor_initializer": 1},
    ],
)
def test_total_and_opt_agree(kwargs: dict[str, int]) -> None:
    """Both call shapes resolve identically for the same explicit widths."""
    assert CodeIndent.total(**kwargs) == CodeIndent.opt(**kwargs)


@mark_config
def test_zero_width_allowed() -> None:
    """Zero is a valid width."""
    assert CodeIndent.total(block=0).block == 0


@mark_config
@parametrize(
    "kwargs",
    [{"block": -1}, {"cascade": -2}, {"expression": 1.5}, {"constructor_initializer": True}],
)
def test_invalid_widths_rejected(kwargs: dict[str, Any]) -> None:
    """Negative, non-int and bool widths raise `OptionsError`."""
    with pytest.raises(OptionsError):
        CodeIndent.total(**kwargs)


@mark_config
def test_options_error_is_value_error() -> None:
    """Callers may catch `ValueError`."""
    with pytest.raises(ValueError, match="block"):
        CodeIndent(block=-4)


@mark_config
def test_builder_merge_and_resolve() -> None:
    """Later layers win field by field; unset widths come from the base."""
    low = MutableCodeIndent(block=4, cascade=4)
    high = MutableCodeIndent(cascade=8)
    merged: MutableCodeIndent = low.merge_with(high)
    assert merged == MutableCodeIndent(block=4, cascade=8)
    assert merged.resolve(CodeIndent(1, 1, 1, 1)) == CodeIndent(4, 8, 1, 1)
    assert merged.freeze() == CodeIndent(4, 8, DEFAULT_EXPRESSION_INDENT, 4)


@mark_config
def test_thaw_freeze_round_trip() -> None:
    """``indent.thaw().freeze() == indent``."""
    indent = CodeIndent(3, 5, 7, 9)
    assert indent.thaw().freeze() == indent
    assert MutableCodeIndent().is_empty()


@mark_config
def test_from_toml_table() -> None:
    """Missing keys stay unset; non-integers are ignored."""
    draft: MutableCodeIndent = MutableCodeIndent.from_toml_table(
        {"block": 4, "cascade": "wide", "expression": True}
    )
    assert draft.block == 4
    assert draft.cascade is None
    assert draft.expression is None
    assert draft.constructor_initializer is None
    assert MutableCodeIndent.from_toml_table(None).is_empty()


@mark_config
def test_to_toml_table() -> None:
    """Export names every width."""
    assert CodeIndent.total(block=DEFAULT_BLOCK_INDENT).to_toml_table() == {
        "block": 2,
        "cascade": 2,
        "expression": 4,
        "constructor_initializer": 4,
    }
