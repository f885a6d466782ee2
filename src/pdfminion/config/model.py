# topmark:header:start
#
#   project      : PDFMinion
#   file         : model.py
#   file_relpath : src/pdfminion/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `MinionConfig`: the resolved configuration read by the formatting
      logic. It is built once from defaults (`MinionConfig.from_defaults`)
      and then updated in place by `MinionConfig.merge_with`.
    - `ConfigOverride`: one source's partial intent (config file, CLI flags,
      API call). Every field is optional; boolean flags are tri-state
      (``bool | None``) so that "explicitly false" and "not given" stay apart.

Merge policy (`MinionConfig.merge_with`), in this order:
    1. A non-empty override locale replaces the base locale. If it is
       supported, all five locale-dependent texts are reset to that
       locale's defaults.
    2. A determined (not ``und``) override locale is assigned once more.
    3. Non-empty override strings replace base strings; this runs after the
       locale reset, so an explicit text beats the locale default.
    4. Boolean flags are assigned only when the override sets them.

Scope:
    - *In scope*: data shapes, field defaults, building overrides from plain
      mappings, and the merge itself.
    - *Out of scope*: YAML I/O (``pdfminion.config.io``) and path checks
      (``pdfminion.config.validation``). The ``*_valid`` flags are set there
      and never touched by merging.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any

from pdfminion.config.keys import CONFIG_KEY_TO_ATTR, Flag, normalize_key
from pdfminion.config.locales import (
    DEFAULT_LOCALE,
    LOCALE_TEXTS,
    LocaleResolution,
    is_undetermined,
    lookup,
    normalize_locale,
    resolve_locale,
)
from pdfminion.config.logging import get_logger
from pdfminion.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_EVENIFY,
    DEFAULT_FORCE,
    DEFAULT_MERGE,
    DEFAULT_MERGE_FILE_NAME,
    DEFAULT_PERSONAL_TOUCH,
    DEFAULT_SEPARATOR,
    DEFAULT_SOURCE_DIR,
    DEFAULT_TARGET_DIR,
    DEFAULT_VERBOSE,
    ORIGIN_API,
    ORIGIN_CLI,
)
from pdfminion.core.diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pdfminion.config.locales import LocaleTexts
    from pdfminion.config.logging import MinionLogger

# ArgsLike: generic mapping accepted by `ConfigOverride.from_args` (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: MinionLogger = get_logger(__name__)

_DEFAULT_TEXTS: LocaleTexts = LOCALE_TEXTS[DEFAULT_LOCALE]

# `ConfigOverride` attribute -> fixed lowercase flag name used by `set_fields`.
FLAG_NAMES: dict[str, str] = {
    "verbose": Flag.VERBOSE,
    "force": Flag.FORCE,
    "evenify": Flag.EVENIFY,
    "merge": Flag.MERGE,
    "personal_touch": Flag.PERSONAL,
}

# String-valued override attributes, in merge order.
TEXT_FIELDS: tuple[str, ...] = (
    "config_file_name",
    "source_dir",
    "target_dir",
    "merge_file_name",
    "running_header",
    "chapter_prefix",
    "page_nr_prefix",
    "page_count_prefix",
    "blank_page_text",
    "separator",
)


# -------------------------- Override (input) --------------------------
@dataclass(frozen=True)
class ConfigOverride:
    """Partial configuration supplied by one source.

    ``None`` means "not provided" for every field. For string fields an empty
    string means the same thing: it never erases a base value.

    Attributes:
        origin (str): Where this override came from (file path, ``<CLI overrides>``).
        config_file_name (str | None): Name or path of the config file in use.
        locale (str | None): Language tag, normalized on construction (``DE_at`` ->
            ``de-AT``); selects the locale default texts.
        verbose (bool | None): Verbose program output.
        source_dir (str | None): Directory containing the input PDFs.
        target_dir (str | None): Directory receiving the processed PDFs.
        force (bool | None): Overwrite existing files in the target directory.
        evenify (bool | None): Append a blank page to files with an odd page count.
        merge (bool | None): Merge all processed files into a single file.
        merge_file_name (str | None): File name of the merged output.
        running_header (str | None): Running page header text.
        chapter_prefix (str | None): Prefix before the chapter number.
        separator (str | None): Separator between chapter and page information.
        page_nr_prefix (str | None): Prefix before the page number.
        page_count_prefix (str | None): Word between page number and page count.
        blank_page_text (str | None): Text printed on inserted blank pages.
        personal_touch (bool | None): Decorative extras (currently inert).
        diagnostics (DiagnosticLog): Warnings collected while building this override.
    """

    origin: str = ORIGIN_API

    config_file_name: str | None = None
    locale: str | None = None
    verbose: bool | None = None

    source_dir: str | None = None
    target_dir: str | None = None
    force: bool | None = None

    evenify: bool | None = None
    merge: bool | None = None
    merge_file_name: str | None = None

    running_header: str | None = None
    chapter_prefix: str | None = None
    separator: str | None = None
    page_nr_prefix: str | None = None
    page_count_prefix: str | None = None
    blank_page_text: str | None = None

    personal_touch: bool | None = None

    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog, compare=False)

    def __post_init__(self) -> None:
        if self.locale:
            object.__setattr__(self, "locale", normalize_locale(self.locale))

    @property
    def set_fields(self) -> dict[str, bool]:
        """Return the explicit-set registry view of the boolean flags.

        Keys are the fixed lowercase names from `pdfminion.config.keys.Flag`;
        only flags this override sets appear, each mapped to True.
        """
        return {name: True for attr, name in FLAG_NAMES.items() if getattr(self, attr) is not None}

    def is_empty(self) -> bool:
        """Return True if this override would not change any base configuration."""
        if self.locale:
            return False
        if any(getattr(self, attr) for attr in TEXT_FIELDS):
            return False
        return not self.set_fields

    @classmethod
    def from_set_fields(
        cls,
        values: Mapping[str, Any],
        set_fields: Mapping[str, bool],
        *,
        origin: str = ORIGIN_API,
    ) -> ConfigOverride:
        """Build an override from values plus an explicit-set registry.

        This accepts the older two-part shape where boolean values are always
        present and a separate ``set_fields`` mapping records which ones the
        user actually chose. A flag whose name is missing from ``set_fields``
        (or mapped to False) becomes ``None``, whatever its value.

        Args:
            values (Mapping[str, Any]): Attribute name -> value.
            set_fields (Mapping[str, bool]): Lowercase flag name -> explicitly set.
            origin (str): Provenance label.

        Returns:
            ConfigOverride: The equivalent tri-state override.
        """
        data: dict[str, Any] = {k: v for k, v in values.items() if k not in FLAG_NAMES}
        for attr, name in FLAG_NAMES.items():
            if set_fields.get(name, False):
                data[attr] = bool(values.get(attr, False))
        return cls.from_args(data, origin=origin)

    @classmethod
    def from_args(cls, args: ArgsLike, *, origin: str = ORIGIN_CLI) -> ConfigOverride:
        """Build an override from a parsed arguments mapping (CLI or API).

        Keys are `ConfigOverride` attribute names. Keys that are absent or
        mapped to ``None`` are treated as "not provided"; unrelated keys (for
        instance ``no_config``) are ignored. Click boolean flag pairs declared
        with ``default=None`` therefore map directly onto the tri-state flags.

        Args:
            args (ArgsLike): Parsed arguments mapping.
            origin (str): Provenance label.

        Returns:
            ConfigOverride: The override.
        """
        kwargs: dict[str, Any] = {}
        for attr in TEXT_FIELDS:
            value = args.get(attr)
            if value is not None:
                kwargs[attr] = str(value)
        for attr in FLAG_NAMES:
            value = args.get(attr)
            if value is not None:
                kwargs[attr] = bool(value)
        raw_locale = args.get("locale")
        if raw_locale is not None:
            kwargs["locale"] = str(raw_locale)

        logger.trace("Override from args (%s): %s", origin, kwargs)
        return cls(origin=origin, **kwargs)

    @classmethod
    def from_mapping(cls, data: Mapping[Any, Any], *, origin: str) -> ConfigOverride:
        """Build an override from a parsed config-file mapping.

        Keys are matched case-insensitively, ignoring ``_`` and ``-``. Unknown
        keys, non-string keys and wrongly-typed values are skipped with a
        warning recorded in the override's diagnostics. Flags must be real
        booleans (YAML ``true``/``false``); strings accept numbers too. An
        unquoted ``language: no`` (parsed by YAML as false) is read as ``no``.

        Args:
            data (Mapping[Any, Any]): Top-level mapping of the config file.
            origin (str): Provenance label, usually the file path.

        Returns:
            ConfigOverride: The override.
        """
        diagnostics = DiagnosticLog()
        kwargs: dict[str, Any] = {}
        seen: dict[str, str] = {}

        def _warn(msg: str) -> None:
            logger.warning("%s: %s", origin, msg)
            diagnostics.add_warning(f"{origin}: {msg}")

        for raw_key, value in data.items():
            if not isinstance(raw_key, str):
                _warn(f"ignoring non-string key {raw_key!r}")
                continue
            attr: str | None = CONFIG_KEY_TO_ATTR.get(normalize_key(raw_key))
            if attr is None:
                _warn(f"ignoring unknown key {raw_key!r}")
                continue
            if value is None:
                logger.debug("%s: key %r has no value, ignored", origin, raw_key)
                continue

            if attr in FLAG_NAMES:
                if not isinstance(value, bool):
                    _warn(f"ignoring {raw_key!r}: expected true or false, got {value!r}")
                    continue
                coerced: Any = value
            elif attr == "locale" and value is False:
                # YAML 1.1 reads an unquoted `no` (Norwegian) as false
                coerced = "no"
            elif isinstance(value, bool):
                _warn(f"ignoring {raw_key!r}: expected text, got {value!r} (quote the value)")
                continue
            elif not isinstance(value, (str, int, float)):
                _warn(f"ignoring {raw_key!r}: expected text, got {value!r}")
                continue
            else:
                coerced = str(value)

            if attr in seen:
                _warn(f"{raw_key!r} overrides earlier key {seen[attr]!r}")
            seen[attr] = raw_key
            kwargs[attr] = coerced

        logger.trace("Override from mapping (%s): %s", origin, kwargs)
        return cls(origin=origin, diagnostics=diagnostics, **kwargs)


# ------------------------ Resolved configuration ------------------------
@dataclass
class MinionConfig:
    """Resolved PDFMinion configuration.

    Built with `from_defaults` and updated in place by `merge_with`. The
    ``*_valid`` flags are owned by ``pdfminion.config.validation``.

    Attributes:
        config_file_name (str): Name or path of the config file in use.
        config_file_valid (bool): Whether the config file exists and parses.
        locale (str): Language tag; always supported right after `from_defaults`.
        verbose (bool): Verbose program output.
        source_dir (str): Directory containing the input PDFs.
        source_dir_valid (bool): Whether ``source_dir`` is an existing, readable directory.
        target_dir (str): Directory receiving the processed PDFs.
        target_dir_valid (bool): Whether ``target_dir`` is writable (or creatable).
        force (bool): Overwrite existing files in the target directory.
        evenify (bool): Append a blank page to files with an odd page count.
        merge (bool): Merge all processed files into a single file.
        merge_file_name (str): File name of the merged output.
        running_header (str): Running page header text.
        chapter_prefix (str): Prefix before the chapter number.
        separator (str): Separator between chapter and page information.
        page_nr_prefix (str): Prefix before the page number.
        page_count_prefix (str): Word between page number and page count.
        blank_page_text (str): Text printed on inserted blank pages.
        personal_touch (bool): Decorative extras (currently inert).
        diagnostics (DiagnosticLog): Notices recorded while building the defaults.
    """

    config_file_name: str = CONFIG_FILE_NAME
    config_file_valid: bool = False
    locale: str = DEFAULT_LOCALE
    verbose: bool = DEFAULT_VERBOSE

    source_dir: str = DEFAULT_SOURCE_DIR
    source_dir_valid: bool = False
    target_dir: str = DEFAULT_TARGET_DIR
    target_dir_valid: bool = False
    force: bool = DEFAULT_FORCE

    # Processing options
    evenify: bool = DEFAULT_EVENIFY
    merge: bool = DEFAULT_MERGE
    merge_file_name: str = DEFAULT_MERGE_FILE_NAME

    # Page formatting
    running_header: str = _DEFAULT_TEXTS.running_header
    chapter_prefix: str = _DEFAULT_TEXTS.chapter_prefix
    separator: str = DEFAULT_SEPARATOR
    page_nr_prefix: str = _DEFAULT_TEXTS.page_nr_prefix
    page_count_prefix: str = _DEFAULT_TEXTS.page_count_prefix
    blank_page_text: str = _DEFAULT_TEXTS.blank_page_text

    personal_touch: bool = DEFAULT_PERSONAL_TOUCH

    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Builders ----------------------------
    @classmethod
    def from_resolution(cls, resolution: LocaleResolution) -> MinionConfig:
        """Create the default configuration for an already resolved locale.

        Args:
            resolution (LocaleResolution): Result of `resolve_locale`.

        Returns:
            MinionConfig: Defaults plus the locale's texts; the fallback
                diagnostic (if any) is recorded in ``diagnostics``.
        """
        config = cls(locale=resolution.locale)
        config.apply_locale_texts(resolution.texts)
        if resolution.diagnostic is not None:
            config.diagnostics.add(resolution.diagnostic)
        return config

    @classmethod
    def from_defaults(cls, locale: str | None = None) -> MinionConfig:
        """Create the default configuration, using ``locale`` for the texts.

        An unsupported (or missing) locale falls back to English. The fallback
        is logged at DEBUG level and recorded in ``diagnostics``.

        Args:
            locale (str | None): Requested language tag, typically the system locale.

        Returns:
            MinionConfig: A fully populated configuration; no path is validated yet.
        """
        logger.debug("Creating new default configuration")
        resolution: LocaleResolution = resolve_locale(locale)
        if resolution.fell_back:
            logger.debug(
                "Language %r not supported, falling back to %r",
                locale,
                resolution.locale,
            )
        return cls.from_resolution(resolution)

    def copy(self) -> MinionConfig:
        """Return an independent copy (merge into it to preview without committing)."""
        return replace(self, diagnostics=DiagnosticLog.from_iterable(self.diagnostics))

    # ----------------------------- Merging -----------------------------
    def apply_locale_texts(self, texts: LocaleTexts) -> None:
        """Overwrite all five locale-dependent texts from ``texts``."""
        self.chapter_prefix = texts.chapter_prefix
        self.running_header = texts.running_header
        self.page_nr_prefix = texts.page_nr_prefix
        self.page_count_prefix = texts.page_count_prefix
        self.blank_page_text = texts.blank_page_text

    def merge_with(self, other: ConfigOverride | None) -> None:
        """Merge ``other`` into this configuration in place.

        ``other`` takes precedence for every value it provides; see the
        module docstring for the exact order. ``other`` is never modified.
        A ``None`` or empty override is a no-op. The method currently never
        raises; ``pdfminion.config.errors.ConfigMergeError`` is reserved for
        merge rules that can fail.

        Args:
            other (ConfigOverride | None): The override to apply.
        """
        if other is None or other.is_empty():
            return

        logger.debug("Merging configuration from %s", other.origin)

        # Locale first: a new supported locale resets all locale texts
        if other.locale:
            self.locale = other.locale
            texts, supported = lookup(other.locale)
            if supported and texts is not None:
                logger.trace("Applying %r texts", other.locale)
                self.apply_locale_texts(texts)
            else:
                logger.debug("Language %r has no default texts", other.locale)

        # TODO: drop this second assignment; after the pass above it always
        # re-assigns the value the locale already holds.
        if other.locale and not is_undetermined(other.locale):
            self.locale = other.locale

        # Only override non-empty strings
        def pick_text(*, current: str, override: str | None) -> str:
            return override if override else current

        self.config_file_name = pick_text(
            current=self.config_file_name, override=other.config_file_name
        )
        self.source_dir = pick_text(current=self.source_dir, override=other.source_dir)
        self.target_dir = pick_text(current=self.target_dir, override=other.target_dir)
        self.merge_file_name = pick_text(
            current=self.merge_file_name, override=other.merge_file_name
        )
        self.running_header = pick_text(current=self.running_header, override=other.running_header)
        self.chapter_prefix = pick_text(current=self.chapter_prefix, override=other.chapter_prefix)
        self.page_nr_prefix = pick_text(current=self.page_nr_prefix, override=other.page_nr_prefix)
        self.page_count_prefix = pick_text(
            current=self.page_count_prefix, override=other.page_count_prefix
        )
        self.blank_page_text = pick_text(
            current=self.blank_page_text, override=other.blank_page_text
        )
        self.separator = pick_text(current=self.separator, override=other.separator)

        # Boolean flags are only merged if they have been explicitly set
        def pick_flag(*, current: bool, override: bool | None) -> bool:
            return override if override is not None else current

        self.verbose = pick_flag(current=self.verbose, override=other.verbose)
        self.force = pick_flag(current=self.force, override=other.force)
        self.evenify = pick_flag(current=self.evenify, override=other.evenify)
        self.merge = pick_flag(current=self.merge, override=other.merge)
        self.personal_touch = pick_flag(current=self.personal_touch, override=other.personal_touch)

        logger.trace("Merged configuration: %s", self)

    def merge_all(self, overrides: Iterable[ConfigOverride | None]) -> None:
        """Merge ``overrides`` into this configuration, left to right."""
        for override in overrides:
            self.merge_with(override)

    def settable_items(self) -> list[tuple[str, Any]]:
        """Return ``(attribute, value)`` pairs for every field an override can set.

        Excludes the ``*_valid`` flags and diagnostics.
        """
        skip: set[str] = {
            "config_file_valid",
            "source_dir_valid",
            "target_dir_valid",
            "diagnostics",
        }
        return [(f.name, getattr(self, f.name)) for f in fields(self) if f.name not in skip]


def build_default(locale: str | None = None) -> tuple[MinionConfig, LocaleResolution]:
    """Build the default configuration and report how the locale was resolved.

    Unlike `MinionConfig.from_defaults` this does not log; callers that want
    to report a fallback themselves inspect the returned resolution.

    Args:
        locale (str | None): Requested language tag.

    Returns:
        tuple[MinionConfig, LocaleResolution]: The configuration and the locale resolution.
    """
    resolution: LocaleResolution = resolve_locale(locale)
    return MinionConfig.from_resolution(resolution), resolution
