# topmark:header:start
#
#   project      : Polisher
#   file         : model.py
#   file_relpath : src/polisher/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter options model and merge policy.

This module defines:
    - `FormatterOptions`: the immutable, fully-resolved configuration handed to
      the formatting engine once per formatting run (or shared between runs).
    - `MutableFormatterOptions`: the sparse builder used while layering a
      requested profile, config files and argument overrides; it is frozen into
      `FormatterOptions`.

Resolution order (lowest → highest precedence):
    1) Library defaults (`polisher.constants`, `DEFAULT_STYLE`, `DEFAULT_TAB_SIZES`)
    2) The style of the requested `CodeProfile`, if any
    3) Discovered config file (``polisher.toml`` / ``[tool.polisher]``)
    4) Extra config files, in the order given
    5) Argument overrides (`MutableFormatterOptions.apply_args`)

Immutability:
    - `FormatterOptions` is ``frozen=True`` and stores a ``frozenset`` of fixes,
      so one instance can be read by many formatting runs at once without
      copying or locking.
    - The one field that may stay unset is ``line_ending``: ``None`` tells the
      formatting engine to infer the newline style from the input text.

Testing guidance:
    - Unit-test merge behavior with synthetic builders (no I/O).
    - Exercise TOML/discovery paths with ``tmp_path`` fixtures.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from polisher.config.fixes import StyleFix, parse_style_fixes
from polisher.config.indent import (
    DEFAULT_TAB_SIZES,
    CodeIndent,
    MutableCodeIndent,
    check_width,
)
from polisher.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_list_value,
    get_table_value,
    load_toml_dict,
)
from polisher.config.keys import Toml
from polisher.config.logging import get_logger
from polisher.config.profiles import CodeProfile
from polisher.config.style import DEFAULT_STYLE, CodeStyle, MutableCodeStyle
from polisher.config.types import LineEnding, OptionsError
from polisher.constants import (
    DEFAULT_INDENT,
    DEFAULT_INSERT_SPACES,
    DEFAULT_PAGE_WIDTH,
    POLISHER_TOML_NAME,
    PYPROJECT_TOML_NAME,
)
from polisher.core.keys import ArgKey

if TYPE_CHECKING:
    from polisher.config.io import TomlTable
    from polisher.config.logging import PolisherLogger
    from polisher.config.types import ArgsLike

logger: PolisherLogger = get_logger(__name__)


# ------------------ Token helpers ------------------


def profile_from_token(raw: CodeProfile | str | int | None, *, source: str = "") -> CodeProfile:
    """Turn a user-supplied profile token into a profile, falling back to the default.

    Args:
        raw (CodeProfile | str | int | None): A profile, code, or name token.
        source (str): Where the token came from, used in warnings.

    Returns:
        CodeProfile: The matching profile, or `CodeProfile.default()` when the
        token is unknown (a warning is logged).
    """
    if isinstance(raw, CodeProfile):
        return raw
    profile: CodeProfile | None = CodeProfile.parse(raw)
    if profile is None:
        fallback: CodeProfile = CodeProfile.default()
        logger.warning(
            "Unknown profile %r%s; falling back to '%s'",
            raw,
            f" in {source}" if source else "",
            fallback.label,
        )
        return fallback
    return profile


def line_ending_from_token(raw: LineEnding | str | None, *, source: str = "") -> str | None:
    """Turn a line-ending token (``"lf"``) or newline string (``"\\n"``) into a newline string.

    Args:
        raw (LineEnding | str | None): Token, newline string or member.
        source (str): Where the token came from, used in warnings.

    Returns:
        str | None: The newline string, or None if ``raw`` is None or unknown
        (unknown tokens are logged and left to be inferred from the input).
    """
    if raw is None:
        return None
    if isinstance(raw, LineEnding):
        return raw.value
    member: LineEnding | None = LineEnding.from_value(raw) or LineEnding.from_name(raw)
    if member is None:
        valid: str = ", ".join(m.token for m in LineEnding)
        logger.warning(
            "Ignoring unknown line ending %r%s (allowed values: %s)",
            raw,
            f" in {source}" if source else "",
            valid,
        )
        return None
    return member.value


# ------------------ Immutable runtime options ------------------


@dataclass(frozen=True, slots=True)
class FormatterOptions:
    """Immutable options that control how the formatting engine lays out code.

    Attributes:
        indent (int): Columns of padding prefixed to every output line (whole
            page, from column 1). For nesting widths see ``tab_sizes``.
        page_width (int): Number of columns the output should fit within.
        line_ending (str | None): Newline sequence to emit. ``None`` means the
            formatting engine infers it from the source text.
        fixes (frozenset[StyleFix]): Style fixes to apply while formatting.
            Stored as given; interpreting them is up to the engine.
        tab_sizes (CodeIndent): Widths for block, cascade, expression and
            constructor-initializer indentation.
        insert_spaces (bool): ``True`` to indent with spaces, ``False`` for tabs.
        style (CodeStyle): Brace and clause placement toggles.

    Raises:
        OptionsError: If a numeric option is out of range or ``line_ending``
            is not a known newline sequence.
    """

    indent: int = DEFAULT_INDENT
    page_width: int = DEFAULT_PAGE_WIDTH
    line_ending: str | None = None
    fixes: frozenset[StyleFix] = frozenset()
    tab_sizes: CodeIndent = DEFAULT_TAB_SIZES
    insert_spaces: bool = DEFAULT_INSERT_SPACES
    style: CodeStyle = DEFAULT_STYLE

    def __post_init__(self) -> None:
        check_width("indent", self.indent)
        check_width("page_width", self.page_width)
        if self.page_width < 1:
            raise OptionsError(f"'page_width' must be at least 1, got {self.page_width}")
        if self.line_ending is not None and LineEnding.from_value(self.line_ending) is None:
            raise OptionsError(
                f"'line_ending' must be one of LF, CRLF or CR, got {self.line_ending!r}"
            )
        if not isinstance(self.insert_spaces, bool):
            raise OptionsError(f"'insert_spaces' must be a bool, got {self.insert_spaces!r}")
        if not isinstance(self.tab_sizes, CodeIndent):
            raise OptionsError(f"'tab_sizes' must be a CodeIndent, got {self.tab_sizes!r}")
        if not isinstance(self.style, CodeStyle):
            raise OptionsError(f"'style' must be a CodeStyle, got {self.style!r}")
        # Accept any iterable of fixes but always store an immutable set
        if not isinstance(self.fixes, frozenset):
            object.__setattr__(self, "fixes", frozenset(self.fixes))

    @classmethod
    def total(
        cls,
        *,
        line_ending: str | None = None,
        indent: int = DEFAULT_INDENT,
        page_width: int = DEFAULT_PAGE_WIDTH,
        insert_spaces: bool = DEFAULT_INSERT_SPACES,
        style: CodeStyle = DEFAULT_STYLE,
        fixes: Iterable[StyleFix] = frozenset(),
        tab_sizes: CodeIndent = DEFAULT_TAB_SIZES,
    ) -> FormatterOptions:
        """Build from explicit values; omitted ones take the library defaults."""
        return cls.opt(
            line_ending=line_ending,
            indent=indent,
            page_width=page_width,
            insert_spaces=insert_spaces,
            style=style,
            fixes=fixes,
            tab_sizes=tab_sizes,
        )

    @classmethod
    def opt(
        cls,
        *,
        line_ending: str | None = None,
        indent: int | None = None,
        page_width: int | None = None,
        insert_spaces: bool | None = None,
        style: CodeStyle | None = None,
        fixes: Iterable[StyleFix] | None = None,
        tab_sizes: CodeIndent | None = None,
    ) -> FormatterOptions:
        """Build from nullable values; ``None`` takes the library default.

        ``FormatterOptions.opt()`` equals ``FormatterOptions.total()`` field by
        field; both leave ``line_ending`` unset.
        """
        return MutableFormatterOptions(
            indent=indent,
            page_width=page_width,
            line_ending=line_ending,
            insert_spaces=insert_spaces,
            fixes=set(fixes) if fixes is not None else None,
            tab_sizes=tab_sizes.thaw() if tab_sizes is not None else MutableCodeIndent(),
            style=style.thaw() if style is not None else MutableCodeStyle(),
        ).freeze()

    @classmethod
    def for_profile(
        cls,
        profile: CodeProfile | str | int | None,
        **overrides: Any,
    ) -> FormatterOptions:
        """Build options whose style comes from ``profile``.

        Args:
            profile (CodeProfile | str | int | None): Profile, code or name.
                Unknown tokens fall back to the default profile.
            **overrides (Any): Keyword arguments accepted by `opt()`; an explicit
                ``style`` replaces the profile's style entirely, ``style=None``
                keeps it.

        Returns:
            FormatterOptions: The resolved options.
        """
        resolved: CodeProfile = profile_from_token(profile)
        if overrides.get("style") is None:
            overrides["style"] = CodeStyle.from_profile(resolved)
        return cls.opt(**overrides)

    def thaw(self) -> MutableFormatterOptions:
        """Return a builder with every field explicitly set from these options.

        ``options.thaw().freeze() == options`` always holds.
        """
        return MutableFormatterOptions(
            indent=self.indent,
            page_width=self.page_width,
            line_ending=self.line_ending,
            insert_spaces=self.insert_spaces,
            fixes=set(self.fixes),
            tab_sizes=self.tab_sizes.thaw(),
            style=self.style.thaw(),
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert these options into a TOML-serializable dict.

        The line ending is written as its token (``"lf"``) and omitted when it
        is left to be inferred. The profile is not exported: the resolved
        style flags are.
        """
        formatting: TomlTable = {
            Toml.KEY_INDENT: self.indent,
            Toml.KEY_PAGE_WIDTH: self.page_width,
            Toml.KEY_INSERT_SPACES: self.insert_spaces,
            Toml.KEY_FIXES: sorted(fix.key for fix in self.fixes),
        }
        line_ending: LineEnding | None = LineEnding.from_value(self.line_ending)
        if line_ending is not None:
            formatting[Toml.KEY_LINE_ENDING] = line_ending.token

        return {
            Toml.SECTION_FORMATTING: formatting,
            Toml.SECTION_INDENT: self.tab_sizes.to_toml_table(),
            Toml.SECTION_STYLE: self.style.to_toml_table(),
        }


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableFormatterOptions:
    """Sparse builder for `FormatterOptions`.

    Every scalar is optional (``None`` = inherit); the composite fields are
    their own sparse builders. `freeze` resolves the builder against the
    requested profile and the library defaults.

    Attributes:
        profile (CodeProfile | None): Profile whose style is the base for
            ``style`` overrides; ``None`` uses `DEFAULT_STYLE`.
        indent (int | None): See `FormatterOptions`.
        page_width (int | None): See `FormatterOptions`.
        line_ending (str | None): See `FormatterOptions`. ``None`` stays "infer"
            after freezing; a later layer cannot reset an explicit value to it.
        insert_spaces (bool | None): See `FormatterOptions`.
        fixes (set[StyleFix] | None): Replaces inherited fixes when not None.
        tab_sizes (MutableCodeIndent): Indent width overrides.
        style (MutableCodeStyle): Style flag overrides applied on top of the
            profile's style.
        config_files (list[Path | str]): Provenance of the merged layers.
    """

    profile: CodeProfile | None = None
    indent: int | None = None
    page_width: int | None = None
    line_ending: str | None = None
    insert_spaces: bool | None = None
    fixes: set[StyleFix] | None = None
    tab_sizes: MutableCodeIndent = field(default_factory=MutableCodeIndent)
    style: MutableCodeStyle = field(default_factory=MutableCodeStyle)

    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def base_style(self) -> CodeStyle:
        """Return the style that ``style`` overrides are applied to."""
        if self.profile is None:
            return DEFAULT_STYLE
        return CodeStyle.from_profile(self.profile)

    def freeze(self) -> FormatterOptions:
        """Resolve this builder into immutable `FormatterOptions`.

        Raises:
            OptionsError: If a resolved value is out of range.
        """
        style: CodeStyle = self.style.resolve(self.base_style())
        logger.trace(
            "Resolving options: profile=%s style overrides=%s",
            self.profile.label if self.profile is not None else None,
            self.style,
        )
        options = FormatterOptions(
            indent=DEFAULT_INDENT if self.indent is None else self.indent,
            page_width=DEFAULT_PAGE_WIDTH if self.page_width is None else self.page_width,
            line_ending=self.line_ending,
            fixes=frozenset(self.fixes) if self.fixes is not None else frozenset(),
            tab_sizes=self.tab_sizes.freeze(),
            insert_spaces=(
                DEFAULT_INSERT_SPACES if self.insert_spaces is None else self.insert_spaces
            ),
            style=style,
        )
        logger.debug("Resolved FormatterOptions: %s", options)
        return options

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableFormatterOptions) -> MutableFormatterOptions:
        """Return a new builder where values from ``other`` override this one.

        Scalars are last-wins with ``None`` never overriding; the indent and
        style builders merge field by field. When ``other`` selects a profile,
        its style replaces the base style, but explicit style overrides
        already collected in ``self`` are kept.

        Args:
            other (MutableFormatterOptions): The layer to apply on top.

        Returns:
            MutableFormatterOptions: The merged builder.
        """
        # Copy so the merged builder never shares a set with either layer
        fixes: set[StyleFix] | None = other.fixes if other.fixes is not None else self.fixes
        return MutableFormatterOptions(
            profile=other.profile if other.profile is not None else self.profile,
            indent=other.indent if other.indent is not None else self.indent,
            page_width=other.page_width if other.page_width is not None else self.page_width,
            line_ending=other.line_ending if other.line_ending is not None else self.line_ending,
            insert_spaces=(
                other.insert_spaces if other.insert_spaces is not None else self.insert_spaces
            ),
            fixes=set(fixes) if fixes is not None else None,
            tab_sizes=self.tab_sizes.merge_with(other.tab_sizes),
            style=self.style.merge_with(other.style),
            config_files=self.config_files + other.config_files,
        )

    def apply_args(self, args: ArgsLike) -> MutableFormatterOptions:
        """Apply overrides from an arguments mapping (CLI or API) in place.

        Keys follow `ArgKey`; keys that are absent or ``None`` leave the
        current value untouched.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableFormatterOptions: ``self``, for chaining.
        """
        logger.debug("Applying argument overrides: %s", args)
        self.config_files.append("<CLI overrides>")

        if args.get(ArgKey.PROFILE) is not None:
            self.profile = profile_from_token(args[ArgKey.PROFILE], source="arguments")
        if args.get(ArgKey.INDENT) is not None:
            self.indent = args[ArgKey.INDENT]
        if args.get(ArgKey.PAGE_WIDTH) is not None:
            self.page_width = args[ArgKey.PAGE_WIDTH]
        if args.get(ArgKey.LINE_ENDING) is not None:
            self.line_ending = line_ending_from_token(
                args[ArgKey.LINE_ENDING], source="arguments"
            )
        if args.get(ArgKey.INSERT_SPACES) is not None:
            self.insert_spaces = args[ArgKey.INSERT_SPACES]
        if args.get(ArgKey.FIXES):
            # Repeated CLI fixes add to the inherited ones
            tokens: list[StyleFix | str] = list(args[ArgKey.FIXES])
            parsed: set[StyleFix] = {t for t in tokens if isinstance(t, StyleFix)}
            parsed |= parse_style_fixes(
                (t for t in tokens if not isinstance(t, StyleFix)), source="arguments"
            )
            self.fixes = (self.fixes or set()) | parsed

        self.tab_sizes = self.tab_sizes.merge_with(
            MutableCodeIndent(
                block=args.get(ArgKey.BLOCK_INDENT),
                cascade=args.get(ArgKey.CASCADE_INDENT),
                expression=args.get(ArgKey.EXPRESSION_INDENT),
                constructor_initializer=args.get(ArgKey.CONSTRUCTOR_INITIALIZER_INDENT),
            )
        )

        logger.debug("Patched MutableFormatterOptions: %s", self)
        return self

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableFormatterOptions:
        """Create a builder from a parsed TOML dict.

        Unknown profile tokens fall back to the default profile; unknown fix
        names and line-ending tokens are dropped. All of these log a warning.

        Args:
            data (TomlTable): The parsed TOML data (``polisher.toml`` content or
                the ``[tool.polisher]`` table).
            config_file (Path | None): Source file, recorded for provenance.

        Returns:
            MutableFormatterOptions: The resulting builder.
        """
        source: str = str(config_file) if config_file is not None else "<dict>"

        formatting_tbl: TomlTable = get_table_value(data, Toml.SECTION_FORMATTING)
        logger.trace("TOML [formatting]: %s", formatting_tbl)

        indent_tbl: TomlTable = get_table_value(data, Toml.SECTION_INDENT)
        logger.trace("TOML [indent]: %s", indent_tbl)

        style_tbl: TomlTable = get_table_value(data, Toml.SECTION_STYLE)
        logger.trace("TOML [style]: %s", style_tbl)

        draft: MutableFormatterOptions = cls(
            tab_sizes=MutableCodeIndent.from_toml_table(indent_tbl),
            style=MutableCodeStyle.from_toml_table(style_tbl),
            config_files=[config_file] if config_file is not None else [],
        )

        if Toml.KEY_PROFILE in formatting_tbl:
            draft.profile = profile_from_token(formatting_tbl[Toml.KEY_PROFILE], source=source)

        draft.indent = get_int_value_or_none(formatting_tbl, Toml.KEY_INDENT)
        draft.page_width = get_int_value_or_none(formatting_tbl, Toml.KEY_PAGE_WIDTH)
        draft.insert_spaces = get_bool_value_or_none(formatting_tbl, Toml.KEY_INSERT_SPACES)

        raw_line_ending: Any = formatting_tbl.get(Toml.KEY_LINE_ENDING)
        if isinstance(raw_line_ending, str):
            draft.line_ending = line_ending_from_token(raw_line_ending, source=source)
        elif raw_line_ending is not None:
            logger.warning("Ignoring non-string line ending in %s: %r", source, raw_line_ending)

        if Toml.KEY_FIXES in formatting_tbl:
            draft.fixes = parse_style_fixes(
                get_list_value(formatting_tbl, Toml.KEY_FIXES), source=source
            )

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableFormatterOptions | None:
        """Load a builder from ``polisher.toml`` or ``pyproject.toml``.

        For ``pyproject.toml`` the ``[tool.polisher]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableFormatterOptions | None: The builder, or None if a
            ``pyproject.toml`` has no ``[tool.polisher]`` table.
        """
        logger.debug("Creating MutableFormatterOptions from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_tbl: TomlTable = get_table_value(toml_data, "tool")
            tool_section: TomlTable = get_table_value(tool_tbl, "polisher")
            if not tool_section:
                logger.error("[tool.polisher] section missing or malformed in %s", path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Return the nearest config file found by walking upward from ``start``.

        In each directory ``polisher.toml`` wins over a ``pyproject.toml``; the
        latter only counts when it has a ``[tool.polisher]`` table.

        Args:
            start (Path): File or directory where discovery starts.

        Returns:
            Path | None: The config file, or None if none was found.
        """
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            candidate: Path = cur / POLISHER_TOML_NAME
            if candidate.is_file():
                logger.debug("Discovered config file: %s", candidate)
                return candidate

            pyproject: Path = cur / PYPROJECT_TOML_NAME
            if pyproject.is_file():
                tool: TomlTable = get_table_value(load_toml_dict(pyproject), "tool")
                if "polisher" in tool:
                    logger.debug("Discovered config file: %s", pyproject)
                    return pyproject

            parent: Path = cur.parent
            if parent == cur:
                return None
            cur = parent

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableFormatterOptions:
        """Discover and merge config layers into a builder.

        Args:
            start (Path | None): Discovery anchor; defaults to the CWD.
            extra_config_files (Iterable[Path] | None): Files merged after the
                discovered one, in the order given.
            no_config (bool): If True, skip discovery (extra files still apply).

        Returns:
            MutableFormatterOptions: A builder ready to receive argument
            overrides and be frozen.
        """
        draft: MutableFormatterOptions = cls()

        if not no_config:
            discovered: Path | None = cls.discover_config_file(start or Path.cwd())
            if discovered is not None:
                layer: MutableFormatterOptions | None = cls.from_toml_file(discovered)
                if layer is not None:
                    draft = draft.merge_with(layer)

        for extra in extra_config_files or ():
            extra_layer: MutableFormatterOptions | None = cls.from_toml_file(Path(extra))
            if extra_layer is not None:
                draft = draft.merge_with(extra_layer)

        return draft


def resolve_options(
    profile: CodeProfile | str | int | None = None,
    overrides: MutableFormatterOptions | None = None,
) -> FormatterOptions:
    """Merge a requested profile, sparse overrides and the defaults into options.

    Args:
        profile (CodeProfile | str | int | None): Requested profile (member, code
            or name). Unknown tokens fall back to the default profile; ``None``
            keeps the profile chosen by ``overrides`` (if any).
        overrides (MutableFormatterOptions | None): Per-field overrides; their
            style flags are applied on top of the profile's style.

    Returns:
        FormatterOptions: The fully-resolved options.
    """
    draft: MutableFormatterOptions = MutableFormatterOptions()
    if overrides is not None:
        draft = draft.merge_with(overrides)
    if profile is not None:
        draft.profile = profile_from_token(profile)
    return draft.freeze()
