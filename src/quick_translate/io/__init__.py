"""I/O layer - persistence of user preferences."""

from .file_language_store import FileLanguageStore
from .language_store import InMemoryLanguageStore, LanguageStore

__all__ = ["LanguageStore", "InMemoryLanguageStore", "FileLanguageStore"]
