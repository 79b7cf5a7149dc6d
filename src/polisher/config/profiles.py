# topmark:header:start
#
#   project      : Polisher
#   file         : profiles.py
#   file_relpath : src/polisher/config/profiles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style profiles: named, numbered presets for a complete code style.

A profile bundles a default set of formatting options. The set of profiles is
closed; each member carries a display name (``label``), a free-text description
and a stable integer ``code``. Saved settings refer to profiles by code, which
survives renames.

Lookups never fail: `CodeProfile.from_code` and `CodeProfile.from_name` return
the default profile (`CodeProfile.DART_STYLE`) when nothing matches. Use
`CodeProfile.parse` when the caller needs to know that a token was unknown.

Registry invariants (checked when this module is imported):
    * codes are unique (``enum.unique``),
    * display names are unique.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import TYPE_CHECKING

from polisher.config.logging import get_logger
from polisher.core.enum_mixins import norm_token

if TYPE_CHECKING:
    from polisher.config.logging import PolisherLogger

logger: PolisherLogger = get_logger(__name__)


@unique
class CodeProfile(Enum):
    """Closed set of style profiles, keyed by their stable code.

    Attributes:
        label (str): Display name of the profile (e.g. ``"Expanded"``).
        description (str): Human-readable summary of the style.
    """

    label: str
    description: str

    DART_STYLE = (0, "Dart Style", "Google 'dart' style [custom tab indents & tab mode]")
    EXPANDED = (1, "Expanded", "dart_style with outer braces on block-like nodes")
    RESERVED_2 = (2, "Reserved 2", "Reserved profile slot; formats like Dart Style")
    RESERVED_3 = (3, "Reserved 3", "Reserved profile slot; formats like Dart Style")

    def __new__(cls, code: int, label: str, description: str) -> CodeProfile:
        """Create a member whose enum value is its ``code``."""
        obj: CodeProfile = object.__new__(cls)
        obj._value_ = code
        obj.label = label
        obj.description = description
        return obj

    @property
    def code(self) -> int:
        """Stable numeric identifier (same as `.value`)."""
        return int(self.value)

    @classmethod
    def default(cls) -> CodeProfile:
        """Return the profile used when a lookup does not match."""
        return cls.DART_STYLE

    @classmethod
    def from_code(cls, code: int | None) -> CodeProfile:
        """Return the profile with ``code``, or the default profile.

        Args:
            code (int | None): Profile code; ``None`` selects the default.

        Returns:
            CodeProfile: The matching profile, or `CodeProfile.default()` on a miss.
        """
        # bool is an int subclass; True must not select code 1
        if not isinstance(code, int) or isinstance(code, bool):
            return cls.default()
        profile: CodeProfile | None = _BY_CODE.get(code)
        if profile is None:
            logger.debug("Unknown profile code %r; using %s", code, cls.default().label)
            return cls.default()
        return profile

    @classmethod
    def from_name(cls, name: str | None) -> CodeProfile:
        """Return the profile whose display name equals ``name``, or the default.

        Matching is exact (case-sensitive), as stored in saved settings.

        Args:
            name (str | None): Profile display name; ``None`` selects the default.

        Returns:
            CodeProfile: The matching profile, or `CodeProfile.default()` on a miss.
        """
        if not isinstance(name, str):
            return cls.default()
        profile: CodeProfile | None = _BY_LABEL.get(name)
        if profile is None:
            logger.debug("Unknown profile name %r; using %s", name, cls.default().label)
            return cls.default()
        return profile

    @classmethod
    def parse(cls, raw: str | int | None) -> CodeProfile | None:
        """Parse a user token into a profile, without falling back.

        Accepts an integer code, a numeric string, a display name or a member
        key (``"expanded"``, ``"dart-style"``); names are compared after
        `norm_token()` normalization.

        Args:
            raw (str | int | None): Token from a config file or the CLI.

        Returns:
            CodeProfile | None: The matching profile, or None when ``raw`` is
            None, not a str or int, or matches nothing.
        """
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            return _BY_CODE.get(raw)
        # Floats, arrays and tables from TOML name no profile
        if not isinstance(raw, str):
            return None
        token: str = norm_token(raw)
        if token.isdigit():
            return _BY_CODE.get(int(token))
        for profile in cls:
            if token in (norm_token(profile.label), norm_token(profile.name)):
                return profile
        return None


def _build_label_index() -> dict[str, CodeProfile]:
    index: dict[str, CodeProfile] = {}
    for profile in CodeProfile:
        if profile.label in index:
            raise ValueError(
                f"Duplicate profile name {profile.label!r} "
                f"(codes {index[profile.label].code} and {profile.code})"
            )
        index[profile.label] = profile
    return index


_BY_CODE: dict[int, CodeProfile] = {p.code: p for p in CodeProfile}
_BY_LABEL: dict[str, CodeProfile] = _build_label_index()

DEFAULT_PROFILE: CodeProfile = CodeProfile.default()
