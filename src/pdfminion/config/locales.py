# topmark:header:start
#
#   project      : PDFMinion
#   file         : locales.py
#   file_relpath : src/pdfminion/config/locales.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locale text table: default display strings per supported locale.

The table is built once at import time and exposed read-only. Lookups are
pure; nothing in this module logs or mutates state, so it is safe to share
across threads once imported.

Locale identifiers are BCP-47-style language tags (``en``, ``de``, ``de-AT``).
Input is normalized first (`normalize_locale`), so ``DE``, ``de_at`` and
``de-AT`` are all accepted. A tag with a region that has no entry of its own
falls back to its primary language (``de-AT`` resolves to ``de``).

Unsupported locales are a normal outcome, not an error: `resolve_locale`
substitutes `DEFAULT_LOCALE` and returns a diagnostic describing the fallback.
Reporting it is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from pdfminion.core.diagnostics import Diagnostic, DiagnosticLevel

UNDETERMINED_LOCALE: Final[str] = "und"

ENGLISH: Final[str] = "en"
GERMAN: Final[str] = "de"

DEFAULT_LOCALE: Final[str] = ENGLISH


@dataclass(frozen=True, slots=True)
class LocaleTexts:
    """The five locale-dependent default strings.

    Attributes:
        chapter_prefix (str): Prefix before the chapter number (``Chapter 3``).
        running_header (str): Text of the running page header.
        page_nr_prefix (str): Prefix before the page number (``Page 12``).
        page_count_prefix (str): Word between page number and page count (``of``).
        blank_page_text (str): Text printed on pages inserted by ``evenify``.
    """

    chapter_prefix: str
    running_header: str
    page_nr_prefix: str
    page_count_prefix: str
    blank_page_text: str


LOCALE_TEXTS: Final[MappingProxyType[str, LocaleTexts]] = MappingProxyType(
    {
        ENGLISH: LocaleTexts(
            chapter_prefix="Chapter",
            running_header="",
            page_nr_prefix="Page",
            page_count_prefix="of",
            blank_page_text="Intentionally left blank",
        ),
        GERMAN: LocaleTexts(
            chapter_prefix="Kapitel",
            running_header="",
            page_nr_prefix="Seite",
            page_count_prefix="von",
            blank_page_text="Diese Seite bleibt absichtlich leer",
        ),
    }
)


@dataclass(frozen=True, slots=True)
class LocaleResolution:
    """Outcome of resolving a requested locale against the text table.

    Attributes:
        requested (str | None): The locale as given by the caller.
        locale (str): The supported locale that was selected.
        texts (LocaleTexts): Default strings for ``locale``.
        fell_back (bool): True if ``requested`` was unsupported and
            `DEFAULT_LOCALE` was substituted.
        diagnostic (Diagnostic | None): Describes the fallback, if any.
    """

    requested: str | None
    locale: str
    texts: LocaleTexts
    fell_back: bool
    diagnostic: Diagnostic | None = None


def normalize_locale(tag: str | None) -> str:
    """Return ``tag`` in canonical case with ``-`` separators.

    The primary language subtag is lowercased, a two-letter region is
    uppercased, other subtags are kept as given. ``None`` and blank input
    yield ``""``.

    Examples:
        >>> normalize_locale("DE")
        'de'
        >>> normalize_locale("de_at")
        'de-AT'
    """
    if not tag:
        return ""
    parts: list[str] = [p for p in tag.strip().replace("_", "-").split("-") if p]
    if not parts:
        return ""
    out: list[str] = [parts[0].lower()]
    for part in parts[1:]:
        out.append(part.upper() if len(part) == 2 and part.isalpha() else part)
    return "-".join(out)


def is_undetermined(locale: str | None) -> bool:
    """Return True if ``locale`` carries no language information."""
    norm: str = normalize_locale(locale)
    return norm in ("", UNDETERMINED_LOCALE)


def supported_locale(locale: str | None) -> str | None:
    """Return the table key that ``locale`` resolves to, or None if unsupported."""
    norm: str = normalize_locale(locale)
    if not norm:
        return None
    if norm in LOCALE_TEXTS:
        return norm
    primary: str = norm.split("-", 1)[0]
    if primary in LOCALE_TEXTS:
        return primary
    return None


def lookup(locale: str | None) -> tuple[LocaleTexts | None, bool]:
    """Look up the default strings for ``locale``.

    Args:
        locale (str | None): A language tag; need not be normalized.

    Returns:
        tuple[LocaleTexts | None, bool]: The text bundle and True if the locale
            is supported, otherwise ``(None, False)``.
    """
    key: str | None = supported_locale(locale)
    if key is None:
        return None, False
    return LOCALE_TEXTS[key], True


def is_supported(locale: str | None) -> bool:
    """Return True if `lookup` would find a text bundle for ``locale``."""
    return supported_locale(locale) is not None


def resolve_locale(locale: str | None) -> LocaleResolution:
    """Resolve ``locale`` to a supported locale, falling back to `DEFAULT_LOCALE`.

    Args:
        locale (str | None): The requested language tag (may be unsupported or empty).

    Returns:
        LocaleResolution: The selected locale and texts, with a fallback
            diagnostic when the request could not be honored.
    """
    key: str | None = supported_locale(locale)
    if key is not None:
        return LocaleResolution(
            requested=locale,
            locale=key,
            texts=LOCALE_TEXTS[key],
            fell_back=False,
        )
    shown: str = locale if locale else "<none>"
    return LocaleResolution(
        requested=locale,
        locale=DEFAULT_LOCALE,
        texts=LOCALE_TEXTS[DEFAULT_LOCALE],
        fell_back=True,
        diagnostic=Diagnostic(
            DiagnosticLevel.INFO,
            f"Language {shown!r} not supported, falling back to {DEFAULT_LOCALE!r}",
        ),
    )
