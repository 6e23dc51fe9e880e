# -*- coding: utf-8 -*-
"""
fix_karachi.i18n

Static English/Urdu string catalog.

Lookup rules:
- Unknown language tag -> DEFAULT_LANGUAGE
- Key missing in the language -> the key itself (never raises)

Keys are flat and dot-separated (e.g. auth.title); no interpolation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from fix_karachi.observability.logging import get_logger

from . import en, ur

log = get_logger(__name__)

Language = Literal["en", "ur"]

DEFAULT_LANGUAGE: Language = "en"

LANGUAGES: Mapping[str, Mapping[str, str]] = {
    "en": en.LANG,
    "ur": ur.LANG,
}


def normalize_language(value: str | None) -> Language:
    if value == "ur":
        return "ur"
    if value == "en":
        return "en"
    return DEFAULT_LANGUAGE


def translate(language: str, key: str) -> str:
    text = LANGUAGES.get(language, LANGUAGES[DEFAULT_LANGUAGE]).get(key)
    if text is None:
        log.warning("i18n.missing_key", key=key, lang=language)
        return key
    return text


def missing_keys(reference: str = "en") -> dict[str, set[str]]:
    """
    Keys present in `reference` but absent from each other language.

    An empty result means the catalogs are in sync.
    """
    ref_keys = set(LANGUAGES[reference])
    out: dict[str, set[str]] = {}
    for lang, catalog in LANGUAGES.items():
        if lang == reference:
            continue
        gap = ref_keys - set(catalog)
        if gap:
            out[lang] = gap
    return out


__all__ = [
    "DEFAULT_LANGUAGE",
    "LANGUAGES",
    "Language",
    "missing_keys",
    "normalize_language",
    "translate",
]
