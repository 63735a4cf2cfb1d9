"""Async workers for non-blocking translation calls using Qt threading."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from quick_translate.core import TranslationRequest, TranslationResult
from quick_translate.services.translation import TranslationError, TranslationGateway

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(object, str)  # TranslationRequest, message
    translation_result = Signal(object)  # TranslationResult


class TranslationWorker(QRunnable):
    """
    Worker that runs one gateway call in a background thread.

    Emits exactly one of translation_result or error, then finished.
    """

    def __init__(self, gateway: TranslationGateway, request: TranslationRequest):
        super().__init__()
        self.gateway = gateway
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation call."""
        request = self.request
        try:
            translated = self.gateway.translate(
                request.text,
                request.source_lang,
                request.target_lang,
            )
            self.signals.translation_result.emit(TranslationResult(request=request, translated_text=translated))
        except TranslationError as e:
            self.signals.error.emit(request, str(e))
        except Exception as e:
            # Anything the gateway did not wrap must not escape the pool thread
            logger.exception("Unexpected error in translation worker")
            self.signals.error.emit(request, f"Unexpected translation error: {e}")
        finally:
            self.signals.finished.emit()
