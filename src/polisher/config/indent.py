# topmark:header:start
#
#   project      : Polisher
#   file         : indent.py
#   file_relpath : src/polisher/config/indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation widths for the different kinds of nesting.

``CodeIndent`` is the resolved value object; ``MutableCodeIndent`` is its
sparse builder where ``None`` means "use the default". Both public call shapes
go through the builder so they resolve identically:

    * ``CodeIndent.total(block=4)``: omitted arguments take the defaults.
    * ``CodeIndent.opt(block=None, ...)``: ``None`` also takes the default.

Widths are validated when a ``CodeIndent`` is created: each must be a
non-negative ``int``.

TOML mapping::

    [indent]
    block = 2
    cascade = 2
    expression = 4
    constructor_initializer = 4
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from polisher.config.io import get_int_value_or_none
from polisher.config.keys import Toml
from polisher.config.types import OptionsError
from polisher.constants import (
    DEFAULT_BLOCK_INDENT,
    DEFAULT_CASCADE_INDENT,
    DEFAULT_CONSTRUCTOR_INITIALIZER_INDENT,
    DEFAULT_EXPRESSION_INDENT,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def check_width(name: str, value: object) -> None:
    """Raise `OptionsError` unless ``value`` is a non-negative int.

    Args:
        name (str): Option name used in the error message.
        value (object): Value to check.

    Raises:
        OptionsError: If ``value`` is not an int (bools included) or is negative.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise OptionsError(f"'{name}' must be an integer, got {value!r}")
    if value < 0:
        raise OptionsError(f"'{name}' must not be negative, got {value}")


@dataclass(frozen=True, slots=True)
class CodeIndent:
    """Number of columns used for each kind of indentation.

    Attributes:
        block (int): Indent of a block or collection body.
        cascade (int): Indent of wrapped cascade sections.
        expression (int): Indent of one level of expression nesting.
        constructor_initializer (int): Indent of the ``:`` on a wrapped
            constructor initialization list.
    """

    block: int = DEFAULT_BLOCK_INDENT
    cascade: int = DEFAULT_CASCADE_INDENT
    expression: int = DEFAULT_EXPRESSION_INDENT
    constructor_initializer: int = DEFAULT_CONSTRUCTOR_INITIALIZER_INDENT

    def __post_init__(self) -> None:
        for f in fields(self):
            check_width(f.name, getattr(self, f.name))

    @classmethod
    def total(
        cls,
        block: int = DEFAULT_BLOCK_INDENT,
        cascade: int = DEFAULT_CASCADE_INDENT,
        expression: int = DEFAULT_EXPRESSION_INDENT,
        constructor_initializer: int = DEFAULT_CONSTRUCTOR_INITIALIZER_INDENT,
    ) -> CodeIndent:
        """Build from explicit widths; omitted ones take the library defaults."""
        return MutableCodeIndent(
            block=block,
            cascade=cascade,
            expression=expression,
            constructor_initializer=constructor_initializer,
        ).freeze()

    @classmethod
    def opt(
        cls,
        block: int | None = None,
        cascade: int | None = None,
        expression: int | None = None,
        constructor_initializer: int | None = None,
    ) -> CodeIndent:
        """Build from nullable widths; ``None`` takes the library default.

        ``CodeIndent.opt()`` equals ``CodeIndent.total()`` field by field.
        """
        return MutableCodeIndent(
            block=block,
            cascade=cascade,
            expression=expression,
            constructor_initializer=constructor_initializer,
        ).freeze()

    def thaw(self) -> MutableCodeIndent:
        """Return a builder with every width explicitly set from this value."""
        return MutableCodeIndent(
            block=self.block,
            cascade=self.cascade,
            expression=self.expression,
            constructor_initializer=self.constructor_initializer,
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize every width to a TOML-friendly dict."""
        return {
            Toml.KEY_BLOCK: self.block,
            Toml.KEY_CASCADE: self.cascade,
            Toml.KEY_EXPRESSION: self.expression,
            Toml.KEY_CONSTRUCTOR_INITIALIZER: self.constructor_initializer,
        }


DEFAULT_TAB_SIZES: CodeIndent = CodeIndent()


@dataclass
class MutableCodeIndent:
    """Sparse builder for `CodeIndent`; ``None`` means "inherit"."""

    block: int | None = None
    cascade: int | None = None
    expression: int | None = None
    constructor_initializer: int | None = None

    def is_empty(self) -> bool:
        """Return True when no width is explicitly set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def merge_with(self, other: MutableCodeIndent) -> MutableCodeIndent:
        """Return a new builder with ``other`` applied over ``self`` (last-wins).

        Args:
            other (MutableCodeIndent): The overrides to apply; ``None`` fields
                keep the current value.

        Returns:
            MutableCodeIndent: Merged builder.
        """
        return MutableCodeIndent(
            block=other.block if other.block is not None else self.block,
            cascade=other.cascade if other.cascade is not None else self.cascade,
            expression=other.expression if other.expression is not None else self.expression,
            constructor_initializer=(
                other.constructor_initializer
                if other.constructor_initializer is not None
                else self.constructor_initializer
            ),
        )

    def resolve(self, base: CodeIndent) -> CodeIndent:
        """Fill unset widths from ``base`` and return a validated `CodeIndent`.

        Args:
            base (CodeIndent): Widths used for unset fields.

        Returns:
            CodeIndent: Fully-resolved indentation.

        Raises:
            OptionsError: If a resolved width is not a non-negative int.
        """
        return CodeIndent(
            block=base.block if self.block is None else self.block,
            cascade=base.cascade if self.cascade is None else self.cascade,
            expression=base.expression if self.expression is None else self.expression,
            constructor_initializer=(
                base.constructor_initializer
                if self.constructor_initializer is None
                else self.constructor_initializer
            ),
        )

    def freeze(self) -> CodeIndent:
        """Resolve against the library defaults (`DEFAULT_TAB_SIZES`)."""
        return self.resolve(DEFAULT_TAB_SIZES)

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any] | None) -> MutableCodeIndent:
        """Create a builder from an ``[indent]`` table; missing keys stay ``None``.

        Range checks are left to `freeze()` so that a later layer can still fix
        a bad value before the options are resolved.

        Args:
            tbl (Mapping[str, Any] | None): Table with keys matching the attributes.

        Returns:
            MutableCodeIndent: Parsed builder.
        """
        if not tbl:
            return cls()
        table: dict[str, Any] = dict(tbl)
        return cls(
            block=get_int_value_or_none(table, Toml.KEY_BLOCK),
            cascade=get_int_value_or_none(table, Toml.KEY_CASCADE),
            expression=get_int_value_or_none(table, Toml.KEY_EXPRESSION),
            constructor_initializer=get_int_value_or_none(
                table, Toml.KEY_CONSTRUCTOR_INITIALIZER
            ),
        )
