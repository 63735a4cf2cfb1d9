"""Input Debouncer - collapses bursts of edits into one trailing-edge event."""

from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot


class InputDebouncer(QObject):
    """
    Trailing-edge debounce over a single-shot QTimer.

    Every notify_input() restarts the timer and replaces the pending text.
    When the quiet period elapses without a new call, `settled` is emitted
    once with the last text.
    """

    settled = Signal(str)

    DEFAULT_QUIET_PERIOD_MS = 250

    def __init__(self, quiet_period_ms: int = DEFAULT_QUIET_PERIOD_MS, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._pending_text: Optional[str] = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(quiet_period_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def quiet_period_ms(self) -> int:
        return self._timer.interval()

    def notify_input(self, text: str) -> None:
        """Record the latest text and restart the quiet period."""
        self._pending_text = text
        self._timer.start()

    def cancel(self) -> None:
        """Drop the pending text without emitting."""
        self._timer.stop()
        self._pending_text = None

    def is_pending(self) -> bool:
        return self._timer.isActive()

    @Slot()
    def _on_timeout(self) -> None:
        text = self._pending_text
        self._pending_text = None
        if text is not None:
            self.settled.emit(text)
