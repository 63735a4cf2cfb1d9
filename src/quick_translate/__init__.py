"""
Quick Translate - a small desktop text translation widget.

This package provides:
- Debounced translation of the text being typed
- Language selectors with persisted choices and a swap button
- Right-to-left alignment for RTL languages
- AWS Translate and Google Gemini translation providers
"""

__version__ = "0.1.0"

# Make key components available at package level
from quick_translate.core import LanguageCatalog, LanguageSlot, Session
from quick_translate.coordinators import TranslationSessionController

__all__ = [
    "LanguageCatalog",
    "LanguageSlot",
    "Session",
    "TranslationSessionController",
]
