"""Translator Window - two text fields, two language selectors and a swap button."""

from typing import Iterable

from PySide6.QtCore import QSignalBlocker, Qt, Signal, Slot
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quick_translate.core import Direction, Language, LanguageSlot


class TranslatorWindow(QMainWindow):
    """Application shell for a single translation session."""

    # Emitted on every user edit of the source field
    source_text_edited = Signal(str)
    # Emitted with the selected language code
    source_language_selected = Signal(str)
    target_language_selected = Signal(str)
    swap_clicked = Signal()

    def __init__(self, languages: Iterable[Language]):
        super().__init__()
        self.setWindowTitle("Quick Translate")
        self.setGeometry(100, 100, 900, 480)

        # An error stays visible until the next translation starts
        self._showing_error = False
        self._setup_ui(list(languages))

    def _setup_ui(self, languages: list[Language]):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(8, 8, 8, 8)
        main_layout.setSpacing(8)

        selectors_layout = QHBoxLayout()
        self.source_lang_combo = QComboBox()
        self.target_lang_combo = QComboBox()
        for language in languages:
            self.source_lang_combo.addItem(language.name, language.code)
            self.target_lang_combo.addItem(language.name, language.code)

        self.swap_button = QPushButton("⇄")
        self.swap_button.setToolTip("Swap languages")
        self.swap_button.setFixedWidth(40)

        selectors_layout.addWidget(self.source_lang_combo, 1)
        selectors_layout.addWidget(self.swap_button)
        selectors_layout.addWidget(self.target_lang_combo, 1)
        main_layout.addLayout(selectors_layout)

        fields_layout = QHBoxLayout()
        self.source_text = QPlainTextEdit()
        self.source_text.setPlaceholderText("Type to translate")
        self.target_text = QPlainTextEdit()
        self.target_text.setReadOnly(True)
        fields_layout.addWidget(self.source_text)
        fields_layout.addWidget(self.target_text)
        main_layout.addLayout(fields_layout, 1)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        main_layout.addWidget(self.status_label)

        self.source_text.textChanged.connect(self._on_source_text_changed)
        self.source_lang_combo.currentIndexChanged.connect(self._on_source_index_changed)
        self.target_lang_combo.currentIndexChanged.connect(self._on_target_index_changed)
        self.swap_button.clicked.connect(self.swap_clicked.emit)

    def set_controller(self, controller):
        """Inject the controller and wire signals in both directions.

        The controller is expected to expose:
        - notify_input(str), set_source_language(str), set_target_language(str), swap_languages()
        - field_text_changed, direction_changed, languages_changed,
          activity_changed and translation_failed signals
        """
        self._controller = controller

        self.source_text_edited.connect(controller.notify_input)
        self.source_language_selected.connect(controller.set_source_language)
        self.target_language_selected.connect(controller.set_target_language)
        self.swap_clicked.connect(controller.swap_languages)

        controller.field_text_changed.connect(self.set_field_text)
        controller.direction_changed.connect(self.set_field_direction)
        controller.languages_changed.connect(self.select_languages)
        controller.activity_changed.connect(self.show_activity)
        controller.translation_failed.connect(self.show_translation_error)

    def field(self, slot: LanguageSlot) -> QPlainTextEdit:
        return self.source_text if slot is LanguageSlot.SOURCE else self.target_text

    @Slot(object, str)
    def set_field_text(self, slot: LanguageSlot, text: str) -> None:
        """Replace a field's text without reporting it as a user edit."""
        field = self.field(slot)
        blocker = QSignalBlocker(field)
        field.setPlainText(text)
        blocker.unblock()

    @Slot(object, object)
    def set_field_direction(self, slot: LanguageSlot, direction: Direction) -> None:
        """Align a field to the reading direction of its language."""
        field = self.field(slot)
        if direction is Direction.RTL:
            field.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
        else:
            field.setLayoutDirection(Qt.LayoutDirection.LeftToRight)

        option = field.document().defaultTextOption()
        option.setTextDirection(field.layoutDirection())
        option.setAlignment(Qt.AlignmentFlag.AlignRight if direction is Direction.RTL else Qt.AlignmentFlag.AlignLeft)
        field.document().setDefaultTextOption(option)

    @Slot(str, str)
    def select_languages(self, source_code: str, target_code: str) -> None:
        """Show the given languages in the selectors without re-emitting a selection."""
        for combo, code in ((self.source_lang_combo, source_code), (self.target_lang_combo, target_code)):
            index = combo.findData(code)
            if index < 0:
                continue
            blocker = QSignalBlocker(combo)
            combo.setCurrentIndex(index)
            blocker.unblock()

    @Slot(bool)
    def show_activity(self, busy: bool) -> None:
        """Show "Translating..." while any field waits, "Ready" once all have settled."""
        if busy:
            self._showing_error = False
            self.status_label.setText("Translating...")
        elif not self._showing_error:
            self.status_label.setText("Ready")
        else:
            return
        self.status_label.setStyleSheet("color: gray;")

    @Slot(object, str)
    def show_translation_error(self, slot: LanguageSlot, error: str) -> None:
        self._showing_error = True
        self.status_label.setText(f"Error: {error}")
        self.status_label.setStyleSheet("color: red;")

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def _on_source_text_changed(self):
        self.source_text_edited.emit(self.source_text.toPlainText())

    def _on_source_index_changed(self, index: int):
        code = self.source_lang_combo.itemData(index)
        if code is not None:
            self.source_language_selected.emit(code)

    def _on_target_index_changed(self, index: int):
        code = self.target_lang_combo.itemData(index)
        if code is not None:
            self.target_language_selected.emit(code)
