"""Translation Session Controller - debounced requests, language switches and result sync."""

import logging
from typing import Hashable, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from quick_translate.coordinators.presentation_sync import PresentationSync
from quick_translate.core import LanguageSlot, Session, TranslationRequest, TranslationResult
from quick_translate.services import InputDebouncer, LanguageState, TranslationGateway, TranslationWorker

logger = logging.getLogger(__name__)


class TranslationSessionController(QObject):
    """
    Orchestrates one translation window.

    Responsibilities:
    - Debounce edits of the source field into one request for the target field.
    - Apply language switches and swaps immediately, re-translating current text.
    - Run gateway calls on the thread pool and apply only the latest result per field.
    - Keep the target placeholder translated into the current target language.
    - Report field text, text direction, languages, activity and failures through signals.
    """

    # (LanguageSlot, text)
    field_text_changed = Signal(object, str)
    # (LanguageSlot, Direction)
    direction_changed = Signal(object, object)
    # (source code, target code)
    languages_changed = Signal(str, str)
    # LanguageSlot whose request is in flight
    translation_started = Signal(object)
    # (LanguageSlot, error message)
    translation_failed = Signal(object, str)
    # True while any field waits for a translation
    activity_changed = Signal(bool)

    PLACEHOLDER_TEXT = "Translate"
    PLACEHOLDER_LANG = "en"
    PLACEHOLDER_CHANNEL = "placeholder"

    def __init__(
        self,
        language_state: LanguageState,
        gateway: TranslationGateway,
        debouncer: Optional[InputDebouncer] = None,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        if language_state is None:
            raise ValueError("LanguageState must not be None")
        if gateway is None:
            raise ValueError("TranslationGateway must not be None")

        self.language_state = language_state
        self.gateway = gateway
        self.session = Session(
            source_lang=language_state.get_language(LanguageSlot.SOURCE),
            target_lang=language_state.get_language(LanguageSlot.TARGET),
        )

        self.debouncer = debouncer or InputDebouncer(parent=self)
        self.debouncer.settled.connect(self._on_input_settled)

        # Thread pool for gateway calls
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.sync = PresentationSync(self.session)
        self.sync.field_updated.connect(self.field_text_changed)

        self._placeholder = self.PLACEHOLDER_TEXT
        self._busy = False
        # Target id reserved by a swap until the source field's translation lands
        self._follow_up_id: Optional[int] = None

    @property
    def placeholder(self) -> str:
        """Placeholder currently shown in the target field while the source is empty."""
        return self._placeholder

    def start(self) -> None:
        """Publish the initial state. Call once the UI is connected."""
        self._publish_languages(LanguageSlot.SOURCE, LanguageSlot.TARGET)
        self._request_placeholder()
        self._translate_source(self.session.source_text)
        self._publish_activity()

    @Slot(str)
    def notify_input(self, text: str) -> None:
        """
        Called on every edit of the source field.

        The request is deferred until the quiet period passes. Any request
        still in flight into the source field (from a swap) is dropped so it
        cannot overwrite what the user is typing.
        """
        self.session.source_text = text
        self.sync.invalidate(LanguageSlot.SOURCE)
        self.debouncer.notify_input(text)
        self._publish_activity()

    @Slot(str)
    def set_source_language(self, code: str) -> bool:
        return self._change_language(LanguageSlot.SOURCE, code)

    @Slot(str)
    def set_target_language(self, code: str) -> bool:
        return self._change_language(LanguageSlot.TARGET, code)

    @Slot()
    def swap_languages(self) -> None:
        """
        Exchange the languages and re-translate both fields from their pre-swap text.

        The target field gets the old target text translated into the new
        target language, the source field gets the old source text translated
        into the new source language. Previous results are never reused.

        When the source has text but the target has none yet (its first
        translation is in flight or the edit was still debouncing), the target
        is translated from the source field as soon as that field's new text
        arrives. The placeholder is shown only when both fields are empty.
        """
        source_text = self.session.source_text
        target_text = self.session.target_text

        self.debouncer.cancel()
        self.language_state.swap()
        self._sync_languages_from_state()
        self._publish_languages(LanguageSlot.SOURCE, LanguageSlot.TARGET)
        self._request_placeholder()
        self._follow_up_id = None

        if target_text:
            self._dispatch(target_text, self.session.source_lang, self.session.target_lang, LanguageSlot.TARGET)
        elif not source_text:
            self._show_placeholder()

        if source_text:
            self._dispatch(source_text, self.session.target_lang, self.session.source_lang, LanguageSlot.SOURCE)
            if not target_text:
                self._follow_up_id = self.sync.issue(LanguageSlot.TARGET)
        else:
            self.sync.invalidate(LanguageSlot.SOURCE)

        self._publish_activity()

    def _change_language(self, slot: LanguageSlot, code: str) -> bool:
        if not self.language_state.set_language(slot, code):
            return False

        self._sync_languages_from_state()
        self._publish_languages(slot)

        # The immediate request below already uses the current text
        self.debouncer.cancel()
        if slot is LanguageSlot.SOURCE:
            # A swap result still in flight is in the previous source language
            self.sync.invalidate(LanguageSlot.SOURCE)
        else:
            self._request_placeholder()
        self._translate_source(self.session.source_text)
        self._publish_activity()
        return True

    @Slot(str)
    def _on_input_settled(self, text: str) -> None:
        self._translate_source(text)
        self._publish_activity()

    def _translate_source(self, text: str) -> None:
        """Translate source-field text into the target field, or show the placeholder."""
        if not text:
            self._show_placeholder()
            return
        self._dispatch(text, self.session.source_lang, self.session.target_lang, LanguageSlot.TARGET)

    def _show_placeholder(self) -> None:
        self.sync.show(LanguageSlot.TARGET, self._placeholder)

    def _request_placeholder(self) -> None:
        """Translate the placeholder into the target language; English is shown meanwhile."""
        self._placeholder = self.PLACEHOLDER_TEXT
        if self.session.target_lang == self.PLACEHOLDER_LANG:
            self.sync.invalidate(self.PLACEHOLDER_CHANNEL)
            return
        self._dispatch(
            self.PLACEHOLDER_TEXT,
            self.PLACEHOLDER_LANG,
            self.session.target_lang,
            self.PLACEHOLDER_CHANNEL,
        )

    def _dispatch(self, text: str, source_lang: str, target_lang: str, destination: Hashable) -> TranslationRequest:
        """Stamp a request for a destination and run it on the thread pool."""
        request = TranslationRequest(
            text=text,
            source_lang=source_lang,
            target_lang=target_lang,
            request_id=self.sync.issue(destination),
            destination=destination,
        )
        logger.debug(
            "Request %d for %s: %s -> %s, %d chars",
            request.request_id,
            destination,
            source_lang,
            target_lang,
            len(text),
        )

        worker = TranslationWorker(gateway=self.gateway, request=request)
        worker.signals.translation_result.connect(self._on_translation_result)
        worker.signals.error.connect(self._on_translation_error)

        if isinstance(destination, LanguageSlot):
            self.translation_started.emit(destination)

        self.thread_pool.start(worker)
        return request

    @Slot(object)
    def _on_translation_result(self, result: TranslationResult) -> None:
        """Handle a gateway result (runs in the main thread)."""
        if result.destination == self.PLACEHOLDER_CHANNEL:
            if not self.sync.accept(result):
                return
            self._placeholder = result.translated_text
            if not self.session.source_text:
                self._show_placeholder()
                self._publish_activity()
            return

        if self.sync.apply(result) and result.destination == LanguageSlot.SOURCE:
            self._translate_follow_up()
        self._publish_activity()

    def _translate_follow_up(self) -> None:
        """Translate the source field's new text into the target reserved by a swap."""
        follow_up_id, self._follow_up_id = self._follow_up_id, None
        if follow_up_id is None or not self.sync.is_current(LanguageSlot.TARGET, follow_up_id):
            return
        self._translate_source(self.session.source_text)

    @Slot(object, str)
    def _on_translation_error(self, request: TranslationRequest, error: str) -> None:
        """Handle a gateway failure. The destination field keeps its last content."""
        if not self.sync.settle_failure(request.destination, request.request_id):
            logger.debug("Ignoring stale failure for %s (request %d)", request.destination, request.request_id)
            return

        if request.destination == LanguageSlot.SOURCE and self._follow_up_id is not None:
            if self.sync.is_current(LanguageSlot.TARGET, self._follow_up_id):
                self.sync.invalidate(LanguageSlot.TARGET)
            self._follow_up_id = None

        logger.error(
            "Translation into %s failed (%s -> %s): %s",
            request.destination,
            request.source_lang,
            request.target_lang,
            error,
        )
        if isinstance(request.destination, LanguageSlot):
            self.translation_failed.emit(request.destination, error)
        self._publish_activity()

    def _publish_activity(self) -> None:
        """Emit activity_changed when the fields go from idle to waiting or back."""
        busy = any(self.sync.is_pending(slot) for slot in LanguageSlot)
        if busy != self._busy:
            self._busy = busy
            self.activity_changed.emit(busy)

    def _sync_languages_from_state(self) -> None:
        self.session.source_lang = self.language_state.get_language(LanguageSlot.SOURCE)
        self.session.target_lang = self.language_state.get_language(LanguageSlot.TARGET)

    def _publish_languages(self, *slots: LanguageSlot) -> None:
        self.languages_changed.emit(self.session.source_lang, self.session.target_lang)
        for slot in slots:
            self.direction_changed.emit(slot, self.language_state.direction(slot))
