"""Language selection and localized message lookup.

The API answers in English or Arabic. Language codes that are not
recognized fall back to English.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Callable, Mapping


class Language(StrEnum):
    """Supported response languages."""

    EN = "en"
    AR = "ar"

    @classmethod
    def coerce(cls, code: str | Language | None) -> Language:
        """Return the matching language, or the default for unknown codes."""
        if isinstance(code, Language):
            return code
        if code:
            try:
                return cls(code.strip().lower()[:2])
            except ValueError:
                pass
        return DEFAULT_LANGUAGE


DEFAULT_LANGUAGE = Language.EN


def resolve_language(accept_language: str | None) -> Language:
    """Pick the response language from an Accept-Language header value.

    Only a leading ``ar`` selects Arabic; everything else is English.
    """
    if accept_language and accept_language.strip().lower().startswith("ar"):
        return Language.AR
    return Language.EN


Message = str | Callable[..., str]


class MessageCatalog:
    """Per-language message table with English fallback.

    Entries are either plain strings or callables taking format arguments
    (for messages such as "Deleted 3 product(s).").
    """

    def __init__(self, messages: Mapping[Language, Mapping[str, Message]]):
        if DEFAULT_LANGUAGE not in messages:
            raise ValueError("Message catalog must define the default language")
        self._messages = messages

    def get(self, key: str, language: Language | str | None = None, *args) -> str:
        """Return the localized message for ``key``.

        Raises:
            KeyError: If the key is missing from the default language as well.
        """
        lang = Language.coerce(language)
        table = self._messages.get(lang, {})
        message = table.get(key) or self._messages[DEFAULT_LANGUAGE][key]
        if callable(message):
            return message(*args)
        return message


class LabelTable:
    """Localized field labels used in validation messages."""

    def __init__(self, labels: Mapping[str, Mapping[Language, str]]):
        self._labels = labels

    def __call__(self, field: str, language: Language | str | None = None) -> str:
        lang = Language.coerce(language)
        entry = self._labels.get(field)
        if not entry:
            return field
        return entry.get(lang) or entry.get(DEFAULT_LANGUAGE) or field
