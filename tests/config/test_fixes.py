# topmark:header:start
#
#   project      : Polisher
#   file         : test_fixes.py
#   file_relpath : tests/config/test_fixes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `StyleFix` parsing."""

from __future__ import annotations

from polisher.config.fixes import StyleFix, parse_style_fixes
from tests.conftest import mark_config, parametrize


@mark_config
@parametrize(
    "raw, expected",
    [
        ("doc-comments", StyleFix.DOC_COMMENTS),
        ("DOC_COMMENTS", StyleFix.DOC_COMMENTS),
        ("new", StyleFix.OPTIONAL_NEW),
        ("single-cascades", StyleFix.SINGLE_CASCADE_STATEMENTS),
        (" Named-Default-Separator ", StyleFix.NAMED_DEFAULT_SEPARATOR),
    ],
)
def test_parse_keys_names_and_aliases(raw: str, expected: StyleFix) -> None:
    """Keys, member names and aliases all parse."""
    assert StyleFix.parse(raw) is expected


@mark_config
def test_keys_are_stable() -> None:
    """The serialized keys are the kebab-case fix names."""
    assert {fix.key for fix in StyleFix} == {
        "doc-comments",
        "function-typedefs",
        "named-default-separator",
        "optional-const",
        "optional-new",
        "single-cascade-statements",
    }


@mark_config
def test_parse_style_fixes_drops_unknown() -> None:
    """Unknown names are dropped; duplicates collapse."""
    fixes: set[StyleFix] = parse_style_fixes(["optional-new", "new", "bogus"], source="test")
    assert fixes == {StyleFix.OPTIONAL_NEW}
