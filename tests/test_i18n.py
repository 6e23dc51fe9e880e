"""
tests.test_i18n

English/Urdu catalog and language context behaviour.
"""

from __future__ import annotations

import pytest

from fix_karachi.i18n import LANGUAGES, missing_keys, normalize_language, translate
from fix_karachi.i18n import en, ur
from fix_karachi.i18n.context import LanguageContext


def test_catalogs_have_equal_key_sets() -> None:
    assert set(en.LANG) == set(ur.LANG)
    assert missing_keys() == {}
    assert missing_keys("ur") == {}


def test_every_english_key_has_real_urdu_text() -> None:
    ctx = LanguageContext("ur")
    for key in en.LANG:
        text = ctx.t(key)
        assert text, key
        assert text != key


@pytest.mark.parametrize("language", ["en", "ur"])
def test_missing_key_returns_key_unchanged(language: str) -> None:
    assert LanguageContext(language).t("nonexistent.key") == "nonexistent.key"
    assert translate(language, "nonexistent.key") == "nonexistent.key"


def test_initial_language_is_english() -> None:
    ctx = LanguageContext()
    assert ctx.current_language() == "en"
    assert ctx.t("auth.title") == "Fix Karachi"


def test_toggle_twice_restores_language() -> None:
    ctx = LanguageContext()
    assert ctx.toggle_language() == "ur"
    assert ctx.t("auth.title") == "فکس کراچی"
    assert ctx.toggle_language() == "en"
    assert ctx.language == "en"


def test_subscribers_are_notified_until_unsubscribed() -> None:
    ctx = LanguageContext()
    seen: list[str] = []
    unsubscribe = ctx.subscribe(seen.append)

    ctx.toggle_language()
    ctx.toggle_language()
    unsubscribe()
    ctx.toggle_language()

    assert seen == ["ur", "en"]
    # Unsubscribing twice is harmless.
    unsubscribe()


def test_setting_same_language_does_not_notify() -> None:
    ctx = LanguageContext("ur")
    seen: list[str] = []
    ctx.subscribe(seen.append)
    ctx.set_language("ur")
    assert seen == []


def test_contexts_are_independent() -> None:
    a = LanguageContext()
    b = LanguageContext()
    a.toggle_language()
    assert a.language == "ur"
    assert b.language == "en"


def test_unknown_language_tag_falls_back_to_default() -> None:
    assert normalize_language("fr") == "en"
    assert normalize_language(None) == "en"
    assert LanguageContext("xx").language == "en"
    assert translate("xx", "auth.login") == LANGUAGES["en"]["auth.login"]


def test_toggle_label_and_direction_follow_language() -> None:
    ctx = LanguageContext()
    assert (ctx.toggle_label, ctx.direction) == ("اردو", "ltr")
    ctx.toggle_language()
    assert (ctx.toggle_label, ctx.direction) == ("English", "rtl")
