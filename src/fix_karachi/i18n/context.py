"""
fix_karachi.i18n.context

Explicit, subscribable language state.

Responsibilities:
- Hold the current language tag for one UI tree (one HTTP request in the web app).
- Flip between English and Urdu and notify subscribers of every change.
- Translate keys against the current language.
"""

from __future__ import annotations

from collections.abc import Callable

from fix_karachi.i18n import DEFAULT_LANGUAGE, Language, normalize_language, translate

LanguageListener = Callable[[Language], None]


class LanguageContext:
    """
    Current language plus subscribers.

    Contexts are independent: toggling one never affects another, so tests and
    concurrent requests each get their own.
    """

    def __init__(self, language: str | None = DEFAULT_LANGUAGE) -> None:
        self._language: Language = normalize_language(language)
        self._listeners: list[LanguageListener] = []

    @property
    def language(self) -> Language:
        return self._language

    def current_language(self) -> Language:
        return self._language

    @property
    def direction(self) -> str:
        return "rtl" if self._language == "ur" else "ltr"

    @property
    def toggle_label(self) -> str:
        # The button names the language you would switch to.
        return "اردو" if self._language == "en" else "English"

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_language(self, language: str) -> None:
        new = normalize_language(language)
        if new == self._language:
            return
        self._language = new
        for listener in list(self._listeners):
            listener(new)

    def toggle_language(self) -> Language:
        self.set_language("ur" if self._language == "en" else "en")
        return self._language

    def t(self, key: str) -> str:
        return translate(self._language, key)

    translate = t

    def __repr__(self) -> str:
        return f"LanguageContext(language={self._language!r})"
