# topmark:header:start
#
#   project      : PDFMinion
#   file         : test_merge_properties.py
#   file_relpath : tests/config/test_merge_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the merge policy.

For arbitrary base configurations and overrides:
1) unset flags and empty strings leave the base untouched,
2) provided values win,
3) merging the same override twice changes nothing the second time.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from pdfminion.config.locales import lookup
from pdfminion.config.model import FLAG_NAMES, TEXT_FIELDS, ConfigOverride, MinionConfig
from tests.strategies_pdfminion import s_config, s_override

_LOCALE_TEXT_FIELDS: frozenset[str] = frozenset(
    {"chapter_prefix", "running_header", "page_nr_prefix", "page_count_prefix", "blank_page_text"}
)


@settings(max_examples=150, deadline=None)
@given(base=s_config(), override=s_override())
def test_flags_follow_explicit_set(base: MinionConfig, override: ConfigOverride) -> None:
    before: MinionConfig = base.copy()

    base.merge_with(override)

    for attr in FLAG_NAMES:
        value: bool | None = getattr(override, attr)
        expected: bool = getattr(before, attr) if value is None else value
        assert getattr(base, attr) is expected, attr


@settings(max_examples=150, deadline=None)
@given(base=s_config(), override=s_override())
def test_texts_never_erased(base: MinionConfig, override: ConfigOverride) -> None:
    before: MinionConfig = base.copy()
    _, resets = lookup(override.locale) if override.locale else (None, False)

    base.merge_with(override)

    for attr in TEXT_FIELDS:
        value: str | None = getattr(override, attr)
        if value:
            assert getattr(base, attr) == value, attr
        elif not (resets and attr in _LOCALE_TEXT_FIELDS):
            assert getattr(base, attr) == getattr(before, attr), attr


@settings(max_examples=150, deadline=None)
@given(base=s_config(), override=s_override())
def test_locale_follows_non_empty_override(base: MinionConfig, override: ConfigOverride) -> None:
    before_locale: str = base.locale

    base.merge_with(override)

    assert base.locale == (override.locale or before_locale)


@settings(max_examples=100, deadline=None)
@given(base=s_config(), override=s_override())
def test_merge_is_idempotent(base: MinionConfig, override: ConfigOverride) -> None:
    base.merge_with(override)
    once: MinionConfig = base.copy()

    base.merge_with(override)

    assert base == once


@settings(max_examples=100, deadline=None)
@given(base=s_config())
def test_empty_override_is_identity(base: MinionConfig) -> None:
    before: MinionConfig = base.copy()

    base.merge_with(ConfigOverride())

    assert base == before


@pytest.mark.hypothesis_slow
@settings(suppress_health_check=[HealthCheck.too_slow], max_examples=1000, deadline=None)
@given(base=s_config(), overrides=st.lists(s_override(), max_size=5))
def test_merge_all_equals_sequential_merges(
    base: MinionConfig, overrides: list[ConfigOverride]
) -> None:
    sequential: MinionConfig = base.copy()
    for override in overrides:
        sequential.merge_with(override)

    base.merge_all(overrides)

    assert base == sequential
    for attr in FLAG_NAMES:
        explicit = [getattr(o, attr) for o in overrides if getattr(o, attr) is not None]
        if explicit:
            assert getattr(base, attr) is explicit[-1], attr
