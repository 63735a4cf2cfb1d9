"""Language preference storage abstraction - durable key/value entries."""

from abc import ABC, abstractmethod
from typing import Optional


class LanguageStore(ABC):
    """
    Abstract key/value store for language preferences.

    Keys are slot storage keys ("source-lang", "target-lang"), values are
    language codes. Implementations decide where the values live.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Retrieve a stored value.

        Args:
            key: Storage key.

        Returns:
            The stored string, or None if nothing is stored under the key.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store or overwrite a value."""
        pass


class InMemoryLanguageStore(LanguageStore):
    """
    Simple in-memory store.

    Used for testing and for sessions that should not touch disk.
    """

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
