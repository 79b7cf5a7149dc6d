# topmark:header:start
#
#   project      : Polisher
#   file         : style.py
#   file_relpath : src/polisher/config/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural style toggles (brace and clause placement).

Design:
    * ``CodeStyle`` is the resolved, immutable bundle of independent boolean
      flags read by the formatting engine. Conceptually it is a bitmask; it is
      stored as named fields so that flags cannot be reordered by accident.
    * ``MutableCodeStyle`` uses tri-state fields (``bool | None``) so overrides
      from config files and the CLI can be layered on top of a profile's style
      without losing "unset" information.
    * ``CodeStyle.from_profile`` maps each `CodeProfile` to its style. Unknown or
      reserved profiles get the default (all-false) style.

Brackets can be ``{}``, ``()`` or ``[]``. Block-like bodies are blocks, class,
extension and mixin declarations, switch statements and switch expressions.
Collection-like syntax covers argument lists, asserts, list, set and map
literals.

TOML mapping::

    [style]
    outer_braces_on_block_like = true
    outer_try_clause_on_newline = true
    outer_if_else_on_newline = true
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from polisher.config.keys import Toml
from polisher.config.logging import get_logger
from polisher.config.profiles import CodeProfile
from polisher.config.types import OptionsError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from polisher.config.logging import PolisherLogger

logger: PolisherLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CodeStyle:
    """Immutable structural style used by the formatting engine.

    Attributes:
        outer_braces_on_block_like (bool): Put the opening ``{`` of block-like
            bodies on its own line. These bodies are always split.
        outer_braces_on_collection_literals (bool): Put the opening bracket of
            a collection literal on its own line when the literal splits.
            Reserved: the engine does not act on it yet.
        outer_braces_on_enum (bool): Split the opening ``{`` of an enum body
            when its contents split; stay folded otherwise.
            Reserved: the engine does not act on it yet.
        outer_try_clause_on_newline (bool): Start ``on``/``catch``/``finally``
            clauses of a try statement on a new line.
        outer_if_else_on_newline (bool): Start ``else`` on a new line instead of
            after ``}`` and a space.
    """

    outer_braces_on_block_like: bool = False
    outer_braces_on_collection_literals: bool = False
    outer_braces_on_enum: bool = False
    outer_try_clause_on_newline: bool = False
    outer_if_else_on_newline: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            value: Any = getattr(self, f.name)
            if not isinstance(value, bool):
                raise OptionsError(f"Style flag '{f.name}' must be a bool, got {value!r}")

    @classmethod
    def from_profile(cls, profile: CodeProfile) -> CodeStyle:
        """Return the style that ``profile`` formats with.

        Args:
            profile (CodeProfile): The profile to derive the style from.

        Returns:
            CodeStyle: The profile's style; all flags off for the default
            profile and for any profile without a dedicated style.
        """
        if profile is CodeProfile.DART_STYLE:
            return cls()
        if profile is CodeProfile.EXPANDED:
            return cls(
                outer_braces_on_block_like=True,
                outer_braces_on_enum=True,
                outer_try_clause_on_newline=True,
                outer_if_else_on_newline=True,
            )
        logger.trace("Profile %r has no dedicated style; using defaults", profile)
        return cls()

    def thaw(self) -> MutableCodeStyle:
        """Return a builder with every flag explicitly set from this style."""
        return MutableCodeStyle(
            outer_braces_on_block_like=self.outer_braces_on_block_like,
            outer_braces_on_collection_literals=self.outer_braces_on_collection_literals,
            outer_braces_on_enum=self.outer_braces_on_enum,
            outer_try_clause_on_newline=self.outer_try_clause_on_newline,
            outer_if_else_on_newline=self.outer_if_else_on_newline,
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize every flag to a TOML-friendly dict."""
        return {
            Toml.KEY_OUTER_BRACES_ON_BLOCK_LIKE: self.outer_braces_on_block_like,
            Toml.KEY_OUTER_BRACES_ON_COLLECTION_LITERALS: (
                self.outer_braces_on_collection_literals
            ),
            Toml.KEY_OUTER_BRACES_ON_ENUM: self.outer_braces_on_enum,
            Toml.KEY_OUTER_TRY_CLAUSE_ON_NEWLINE: self.outer_try_clause_on_newline,
            Toml.KEY_OUTER_IF_ELSE_ON_NEWLINE: self.outer_if_else_on_newline,
        }


DEFAULT_STYLE: CodeStyle = CodeStyle()


@dataclass
class MutableCodeStyle:
    """Mutable, tri-state builder for `CodeStyle`.

    Every attribute mirrors `CodeStyle`; ``None`` means "inherit from the base
    style" (the profile's style or `DEFAULT_STYLE`).
    """

    outer_braces_on_block_like: bool | None = None
    outer_braces_on_collection_literals: bool | None = None
    outer_braces_on_enum: bool | None = None
    outer_try_clause_on_newline: bool | None = None
    outer_if_else_on_newline: bool | None = None

    def is_empty(self) -> bool:
        """Return True when no flag is explicitly set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def merge_with(self, other: MutableCodeStyle) -> MutableCodeStyle:
        """Return a new builder with ``other`` applied over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.

        Args:
            other (MutableCodeStyle): The overrides to apply.

        Returns:
            MutableCodeStyle: Merged builder.
        """
        merged: dict[str, bool | None] = {}
        for f in fields(self):
            override: bool | None = getattr(other, f.name)
            merged[f.name] = override if override is not None else getattr(self, f.name)
        return MutableCodeStyle(**merged)

    def resolve(self, base: CodeStyle) -> CodeStyle:
        """Fill unset flags from ``base`` and return a frozen style.

        Args:
            base (CodeStyle): Style providing values for unset flags.

        Returns:
            CodeStyle: Fully-resolved style.
        """
        resolved: dict[str, bool] = {}
        for f in fields(self):
            value: bool | None = getattr(self, f.name)
            resolved[f.name] = getattr(base, f.name) if value is None else value
        return CodeStyle(**resolved)

    def freeze(self) -> CodeStyle:
        """Resolve against `DEFAULT_STYLE`."""
        return self.resolve(DEFAULT_STYLE)

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any] | None) -> MutableCodeStyle:
        """Create a builder from a ``[style]`` table; missing keys stay ``None``.

        Args:
            tbl (Mapping[str, Any] | None): Table with keys matching the attributes.

        Returns:
            MutableCodeStyle: Parsed builder.
        """
        if not tbl:
            return cls()

        def pick(key: str) -> bool | None:
            if key not in tbl:
                return None
            value: Any = tbl[key]
            if not isinstance(value, bool):
                logger.warning("Ignoring non-boolean style flag '%s': %r", key, value)
                return None
            return value

        return cls(
            outer_braces_on_block_like=pick(Toml.KEY_OUTER_BRACES_ON_BLOCK_LIKE),
            outer_braces_on_collection_literals=pick(
                Toml.KEY_OUTER_BRACES_ON_COLLECTION_LITERALS
            ),
            outer_braces_on_enum=pick(Toml.KEY_OUTER_BRACES_ON_ENUM),
            outer_try_clause_on_newline=pick(Toml.KEY_OUTER_TRY_CLAUSE_ON_NEWLINE),
            outer_if_else_on_newline=pick(Toml.KEY_OUTER_IF_ELSE_ON_NEWLINE),
        )
