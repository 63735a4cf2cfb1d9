"""Session entities - the live translation state and request/result records."""

from dataclasses import dataclass
from enum import Enum


class LanguageSlot(str, Enum):
    """Language role of a field. Also identifies the field itself."""

    SOURCE = "source"
    TARGET = "target"

    @property
    def storage_key(self) -> str:
        """Key under which this slot's language is persisted."""
        return f"{self.value}-lang"


@dataclass
class Session:
    """Mutable state of one translation window.

    source_lang == target_lang is allowed; the provider simply echoes.
    target_text holds the last applied translation, never the placeholder.
    """

    source_lang: str
    target_lang: str
    source_text: str = ""
    target_text: str = ""

    def set_text(self, slot: LanguageSlot, text: str) -> None:
        if slot is LanguageSlot.SOURCE:
            self.source_text = text
        else:
            self.target_text = text


@dataclass(frozen=True)
class TranslationRequest:
    """A single call to the translation gateway.

    Attributes:
        text: Text to translate.
        source_lang: Language the text is written in.
        target_lang: Language to translate into.
        request_id: Strictly increasing per destination.
        destination: Channel the result is applied to (a LanguageSlot, or another
            hashable key such as the placeholder channel).
    """

    text: str
    source_lang: str
    target_lang: str
    request_id: int
    destination: object


@dataclass(frozen=True)
class TranslationResult:
    """Completed translation for a request."""

    request: TranslationRequest
    translated_text: str

    @property
    def request_id(self) -> int:
        return self.request.request_id

    @property
    def destination(self) -> object:
        return self.request.destination
