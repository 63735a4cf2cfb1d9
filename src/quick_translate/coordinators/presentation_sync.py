"""Presentation Sync - applies translation results to fields, dropping stale ones."""

import logging
from typing import Hashable

from PySide6.QtCore import QObject, Signal

from quick_translate.core import LanguageSlot, Session, TranslationResult

logger = logging.getLogger(__name__)


class PresentationSync(QObject):
    """
    Tracks the latest request issued per destination and applies only its result.

    Request ids are strictly increasing per destination. A result is applied
    when its id equals the destination's latest id; anything older is a stale
    response and is discarded. Destinations are usually LanguageSlot values,
    but any hashable key works (the controller uses one for the placeholder).
    A destination is pending from issue() until its latest request is settled
    by a result, a failure or invalidate().

    All methods must be called from the thread that owns the session.
    """

    # (LanguageSlot, text shown in that field)
    field_updated = Signal(object, str)

    def __init__(self, session: Session):
        super().__init__()
        self._session = session
        self._latest: dict[Hashable, int] = {}
        self._pending: set[Hashable] = set()

    def issue(self, destination: Hashable) -> int:
        """Allocate the next request id for a destination and make it the current one."""
        request_id = self._next_id(destination)
        self._pending.add(destination)
        return request_id

    def invalidate(self, destination: Hashable) -> None:
        """Make every outstanding request for a destination stale."""
        self._next_id(destination)
        self._pending.discard(destination)

    def latest_id(self, destination: Hashable) -> int:
        """Latest id issued for a destination, 0 if none."""
        return self._latest.get(destination, 0)

    def is_current(self, destination: Hashable, request_id: int) -> bool:
        return request_id == self._latest.get(destination)

    def is_pending(self, destination: Hashable) -> bool:
        """True while the destination's latest request has not been settled."""
        return destination in self._pending

    def accept(self, result: TranslationResult) -> bool:
        """Return True if the result belongs to the destination's latest request."""
        if self.is_current(result.destination, result.request_id):
            self._pending.discard(result.destination)
            return True

        logger.debug(
            "Ignoring stale result for %s (request %d, current %d)",
            result.destination,
            result.request_id,
            self.latest_id(result.destination),
        )
        return False

    def settle_failure(self, destination: Hashable, request_id: int) -> bool:
        """Return True if a failed request was the destination's latest one."""
        if not self.is_current(destination, request_id):
            return False
        self._pending.discard(destination)
        return True

    def apply(self, result: TranslationResult) -> bool:
        """
        Write a result into its field if it is current.

        Args:
            result: Completed translation whose destination is a LanguageSlot.

        Returns:
            True if the field was updated, False if the result was stale.
        """
        if not self.accept(result):
            return False

        slot = LanguageSlot(result.destination)
        self._session.set_text(slot, result.translated_text)
        self.field_updated.emit(slot, result.translated_text)
        return True

    def show(self, slot: LanguageSlot, display_text: str, session_text: str = "") -> None:
        """
        Set a field locally, outranking any request still in flight for it.

        Args:
            slot: Field to update.
            display_text: Text shown in the field.
            session_text: Value recorded in the session (placeholders are
                shown but not recorded).
        """
        self.invalidate(slot)
        self._session.set_text(slot, session_text)
        self.field_updated.emit(slot, display_text)

    def _next_id(self, destination: Hashable) -> int:
        request_id = self._latest.get(destination, 0) + 1
        self._latest[destination] = request_id
        return request_id
