"""Language State - current source/target languages with persistence."""

import logging

from quick_translate.core import Direction, LanguageCatalog, LanguageSlot
from quick_translate.io import LanguageStore

logger = logging.getLogger(__name__)


class LanguageState:
    """
    Holds the language code of each slot and keeps the store in sync.

    Invalid codes are rejected without raising: set_language() leaves the
    state untouched and returns False.
    """

    DEFAULTS = {LanguageSlot.SOURCE: "en", LanguageSlot.TARGET: "fa"}

    def __init__(self, catalog: LanguageCatalog, store: LanguageStore):
        self._catalog = catalog
        self._store = store
        self._languages = {slot: self._restore(slot) for slot in LanguageSlot}

    @property
    def catalog(self) -> LanguageCatalog:
        return self._catalog

    def get_language(self, slot: LanguageSlot) -> str:
        return self._languages[slot]

    def set_language(self, slot: LanguageSlot, code: str) -> bool:
        """
        Change the language of a slot.

        Args:
            slot: Slot to change.
            code: New language code.

        Returns:
            True if the code was accepted and persisted, False if it was
            rejected as unsupported.
        """
        if not self._catalog.is_supported(code):
            logger.warning("Ignoring unsupported %s language %r", slot.value, code)
            return False

        self._languages[slot] = code
        self._store.set(slot.storage_key, code)
        return True

    def swap(self) -> None:
        """Exchange the source and target languages."""
        source = self._languages[LanguageSlot.SOURCE]
        target = self._languages[LanguageSlot.TARGET]
        self.set_language(LanguageSlot.SOURCE, target)
        self.set_language(LanguageSlot.TARGET, source)

    def direction(self, slot: LanguageSlot) -> Direction:
        return self._catalog.direction(self._languages[slot])

    def _restore(self, slot: LanguageSlot) -> str:
        """Read a persisted code, replacing missing or unknown values with the default."""
        value = self._store.get(slot.storage_key)
        if self._catalog.is_supported(value):
            return value

        default = self.DEFAULTS[slot]
        if value is not None:
            logger.warning("Stored %s language %r is not supported, using %r", slot.value, value, default)
        self._store.set(slot.storage_key, default)
        return default
