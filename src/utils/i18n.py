"""Dictionary-based UI strings for the distribution demo.

English text is the lookup key, so ``tr()`` returns the key unchanged when
no translation is loaded. Other languages live in ``src/utils/lang/<code>.py``
as a module-level ``STRINGS`` dict.
"""

from __future__ import annotations

import importlib
import logging

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES: dict[str, str] = {
    "en": "English",
    "ru": "Русский",
}

_strings: dict[str, str] = {}
_lang: str = "en"


def init_language(lang_code: str = "en") -> None:
    """Load language strings. Call once at app startup before UI creation.

    An unknown code falls back to English.
    """
    global _strings, _lang
    strings: dict[str, str] = {}
    if lang_code != "en":
        try:
            strings = importlib.import_module(f"src.utils.lang.{lang_code}").STRINGS
        except (ImportError, AttributeError):
            logger.warning("No UI strings for language %r, using English", lang_code)
            lang_code = "en"
    _strings = strings
    _lang = lang_code


def tr(key: str) -> str:
    """Translate *key* to the current language. Returns *key* unchanged if no translation."""
    return _strings.get(key, key)


def current_language() -> str:
    """Return the active language code (e.g. 'en', 'ru')."""
    return _lang
