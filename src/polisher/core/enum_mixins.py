# topmark:header:start
#
#   project      : Polisher
#   file         : enum_mixins.py
#   file_relpath : src/polisher/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum helpers for identifiers that users type in config files and on the CLI.

``norm_token`` folds case, dashes and spaces so ``"Optional-New"``,
``"optional_new"`` and ``"OPTIONAL NEW"`` compare equal. ``KeyedStrEnum``
stores a stable kebab-case key as the member value (what gets saved) and keeps
a label and spelling aliases beside it (what gets read).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def norm_token(s: str) -> str:
    """Fold ``s`` to lower snake case for loose comparisons."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """String enum keyed by a saved identifier, with a label and aliases.

    Members are declared as ``NAME = (key, label)`` or
    ``NAME = (key, label, aliases)``.

    Attributes:
        label (str): Short human description.
        aliases (tuple[str, ...]): Extra spellings accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Build a member whose ``str`` value and enum value are both ``key``."""
        member: _KS = str.__new__(cls, key)
        member._value_ = key
        member.label = label
        member.aliases = tuple(aliases)
        return member

    @property
    def key(self) -> str:
        """Identifier written to config files."""
        return str(self.value)

    def spellings(self) -> tuple[str, ...]:
        """Return the normalized tokens that select this member."""
        return tuple(norm_token(t) for t in (self.key, self.name, *self.aliases))

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Return the member selected by ``raw``, or None.

        ``raw`` may be the key, the member name or an alias, in any case and
        with dashes, underscores or spaces.
        """
        if raw is None:
            return None
        wanted: str = norm_token(raw)
        return next((member for member in cls if wanted in member.spellings()), None)
