# topmark:header:start
#
#   project      : Polisher
#   file         : io.py
#   file_relpath : src/polisher/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight TOML I/O helpers for Polisher configuration.

Pure helpers for reading and writing the TOML documents that feed
`MutableFormatterOptions`. The typed getters never raise: a missing or
mistyped value comes back as ``None`` (or an empty container) so the option
builders can treat it as "inherit".

Notes:
    - Plain parsing and dumping use `toml`.
    - `tomlkit` is used by `nest_toml_under_section` only, to wrap a rendered
      document under ``[tool.polisher]`` for pasting into ``pyproject.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from polisher.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from polisher.config.logging import PolisherLogger

logger: PolisherLogger = get_logger(__name__)

TomlTable = dict[str, Any]


__all__: list[str] = [
    "TomlTable",
    "is_toml_table",
    "get_table_value",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_list_value",
    "load_toml_dict",
    "to_toml",
    "nest_toml_under_section",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Return True if ``val`` is a TOML table (a ``dict`` after parsing)."""
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``table[key]``; ``{}`` when absent or not a table.

    ``[formatting]``, ``[indent]`` and ``[style]`` are all optional, so a
    missing section reads the same as an empty one.
    """
    section: Any = table.get(key)
    return section if is_toml_table(section) else {}


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Read a boolean option such as ``insert_spaces``.

    Only TOML booleans count: ``insert_spaces = 0`` is ignored like any other
    mistyped value, matching the ``[style]`` flags.

    Args:
        table (TomlTable): Section to read from.
        key (str): Option name.

    Returns:
        bool | None: The flag, or ``None`` when the key is absent or holds
        another type (logged as a warning).
    """
    raw: Any = table.get(key)
    if raw is None or isinstance(raw, bool):
        return raw
    logger.warning("Ignoring non-boolean value for '%s': %r", key, raw)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Read a width such as ``page_width`` or ``block``.

    Booleans and floats are not widths: ``block = true`` must not become an
    indent of 1. Range checks happen later, when the options are frozen.

    Args:
        table (TomlTable): Section to read from.
        key (str): Option name.

    Returns:
        int | None: The integer, or ``None`` when absent or mistyped (logged).
    """
    raw: Any = table.get(key)
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    logger.warning("Ignoring non-integer value for '%s': %r", key, raw)
    return None


def get_list_value(table: TomlTable, key: str) -> list[Any]:
    """Return ``table[key]`` if it is an array, else ``[]``. Items are not checked."""
    items: Any = table.get(key)
    return items if isinstance(items, list) else []


def load_toml_dict(path: Path) -> TomlTable:
    """Parse the TOML file at ``path`` (UTF-8).

    A config file that cannot be read or parsed must not stop the formatter,
    so both failures are logged as errors and an empty table is returned.

    Args:
        path (Path): ``polisher.toml``, ``pyproject.toml`` or a ``--config`` file.

    Returns:
        TomlTable: The document, or ``{}`` on failure.
    """
    try:
        return toml.load(path)
    except OSError as exc:
        logger.error("Cannot read config file %s: %s", path, exc)
    except toml.TomlDecodeError as exc:
        logger.error("Invalid TOML in %s: %s", path, exc)
    return {}


def to_toml(toml_dict: TomlTable) -> str:
    """Render ``toml_dict`` as a TOML document."""
    return toml.dumps(toml_dict)


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    """Return ``toml_doc`` moved under the dotted table ``section_keys``.

    ``nest_toml_under_section("[formatting]\\nindent = 0\\n", "tool.polisher")``
    yields a document equivalent to::

        [tool.polisher.formatting]
        indent = 0

    Only keyed items are moved; top-level comments are dropped. Intermediate
    tables are emitted as super tables so no empty ``[tool]`` header appears.

    Args:
        toml_doc (str): The rendered document.
        section_keys (str): Dotted table path such as ``"tool.polisher"``.

    Returns:
        str: The nested document.

    Raises:
        ValueError: If ``section_keys`` has no non-empty component.
        RuntimeError: If ``toml_doc`` is not valid TOML.
    """
    path: list[str] = [part for part in section_keys.split(".") if part]
    if not path:
        raise ValueError(f"Invalid section path {section_keys!r}: no table name")

    try:
        source: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise RuntimeError(f"Cannot nest invalid TOML: {exc}") from exc

    nested: tomlkit.TOMLDocument = tomlkit.document()
    target: tomlkit.TOMLDocument | Table = nested
    for depth, name in enumerate(path, start=1):
        table: Table = tomlkit.table(is_super_table=depth < len(path))
        target.add(name, table)
        target = table

    for name, item in source.items():
        target.add(name, item)

    return nested.as_string()
