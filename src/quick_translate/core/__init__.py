"""Domain layer - plain entities describing languages and translation state."""

from .language import Direction, Language, LanguageCatalog
from .language_tables import RTL_LANGUAGES, SUPPORTED_LANGUAGES, default_catalog
from .session import Session, LanguageSlot, TranslationRequest, TranslationResult

__all__ = [
    "Direction",
    "Language",
    "LanguageCatalog",
    "RTL_LANGUAGES",
    "SUPPORTED_LANGUAGES",
    "default_catalog",
    "Session",
    "LanguageSlot",
    "TranslationRequest",
    "TranslationResult",
]
