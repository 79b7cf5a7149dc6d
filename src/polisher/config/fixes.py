# topmark:header:start
#
#   project      : Polisher
#   file         : fixes.py
#   file_relpath : src/polisher/config/fixes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named style fixes the formatting engine may apply while formatting.

The configuration layer only stores these identifiers; it never interprets
them. Loaders use `StyleFix.parse` / `parse_style_fixes` to turn user tokens
into members and report unknown names.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from polisher.config.logging import get_logger
from polisher.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    from polisher.config.logging import PolisherLogger

logger: PolisherLogger = get_logger(__name__)


class StyleFix(KeyedStrEnum):
    """Source-level transformations applied by the formatting engine."""

    DOC_COMMENTS = ("doc-comments", "Use triple slash for documentation comments")
    FUNCTION_TYPEDEFS = ("function-typedefs", "Use new syntax for function type typedefs")
    NAMED_DEFAULT_SEPARATOR = (
        "named-default-separator",
        "Use '=' as named parameter default separator",
    )
    OPTIONAL_CONST = ("optional-const", "Remove 'const' keywords inside const context")
    OPTIONAL_NEW = ("optional-new", "Remove all usages of 'new' keyword", ("new",))
    SINGLE_CASCADE_STATEMENTS = (
        "single-cascade-statements",
        "Remove unnecessary single cascades from expression statements",
        ("single-cascades",),
    )


def parse_style_fixes(tokens: Iterable[str], *, source: str = "") -> set[StyleFix]:
    """Parse fix names, dropping (and logging) tokens that match no `StyleFix`.

    Args:
        tokens (Iterable[str]): Raw fix names from TOML or the CLI.
        source (str): Where the tokens came from, used in warnings.

    Returns:
        set[StyleFix]: The recognized fixes.
    """
    fixes: set[StyleFix] = set()
    for token in tokens:
        fix: StyleFix | None = StyleFix.parse(str(token))
        if fix is None:
            valid: str = ", ".join(f.key for f in StyleFix)
            logger.warning(
                "Ignoring unknown style fix %r%s (allowed values: %s)",
                token,
                f" in {source}" if source else "",
                valid,
            )
            continue
        fixes.add(fix)
    return fixes
