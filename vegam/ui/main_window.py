from __future__ import annotations

from functools import partial
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from vegam.core.config import DURATIONS, SessionConfig
from vegam.core.session import SessionView, TypingSession
from vegam.core.state import Phase
from vegam.core.words import WordRepository
from vegam.ui.colors import TypingColors
from vegam.ui.models import build_word_cells, placeholder_text
from vegam.ui.qt_clock import QtClock
from vegam.ui.typing_widgets import CountdownLabel, WordWindowWidget


class MainWindow(QMainWindow):
    """Single-screen typing speed test.

    Forwards input edits and the space key to a :class:`TypingSession` and
    re-renders from its :class:`SessionView` after every change.
    """

    def __init__(self, words: WordRepository, config: SessionConfig) -> None:
        super().__init__()
        self._config = config
        self._clock = QtClock(parent=self)

        self._duration_buttons: dict[int, QPushButton] = {}
        self._word_window: Optional[WordWindowWidget] = None
        self._countdown_label: Optional[CountdownLabel] = None
        self._results_card: Optional[QFrame] = None
        self._wpm_label: Optional[QLabel] = None
        self._errors_label: Optional[QLabel] = None
        self._accuracy_label: Optional[QLabel] = None
        self.input_box: Optional[QLineEdit] = None

        self._build_ui()

        self._session = TypingSession(
            words.all(),
            config=config,
            clock=self._clock,
            on_update=self._render,
            on_scroll=self._on_scroll,
        )
        self._render(self._session.view())
        QTimer.singleShot(0, self.input_box.setFocus)

    def _build_ui(self) -> None:
        """Construct the widget tree: duration row, word window, input, results."""
        self.setWindowTitle("Vegam - Typing Speed Test")
        self.setMinimumSize(900, 560)
        self.setStyleSheet(f"""
            QMainWindow {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {TypingColors.BG_TOP}, stop:1 {TypingColors.BG_BOTTOM});
            }}
            QPushButton {{
                background: {TypingColors.PRIMARY};
                color: white;
                border: none;
                border-radius: 10px;
                padding: 8px 16px;
                font-weight: 700;
            }}
            QPushButton:checked {{ background: {TypingColors.PRIMARY_DARK}; }}
            QPushButton:disabled {{ background: {TypingColors.TEXT_MUTED}; }}
        """)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(18)
        self.setCentralWidget(central)

        title = QLabel("Typing Speed Test")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {TypingColors.TEXT_PRIMARY}; font-size: 30px; font-weight: 900;")
        layout.addWidget(title)

        duration_row = QHBoxLayout()
        duration_row.addStretch(1)
        for seconds in DURATIONS:
            button = QPushButton(f"{seconds} Seconds")
            button.setCheckable(True)
            button.clicked.connect(partial(self._select_duration, seconds))
            self._duration_buttons[seconds] = button
            duration_row.addWidget(button)
        duration_row.addStretch(1)
        layout.addLayout(duration_row)

        card = QFrame()
        card.setStyleSheet(
            f"QFrame {{ background: {TypingColors.CARD_BG}; border: 1px solid {TypingColors.CARD_BORDER};"
            " border-radius: 16px; }"
        )
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 16, 16, 16)
        self._word_window = WordWindowWidget(row_size=self._config.row_size)
        card_layout.addWidget(self._word_window)
        layout.addWidget(card, 1)

        self.input_box = QLineEdit()
        self.input_box.setMinimumHeight(48)
        self.input_box.setStyleSheet(
            f"QLineEdit {{ font-size: 20px; border: 2px solid {TypingColors.PRIMARY_LIGHT};"
            " border-radius: 10px; padding: 6px 12px; background: white; }"
        )
        self.input_box.textEdited.connect(self._on_text_edited)
        self.input_box.installEventFilter(self)
        layout.addWidget(self.input_box)

        self._countdown_label = CountdownLabel()
        layout.addWidget(self._countdown_label)

        self._results_card = QFrame()
        results_layout = QHBoxLayout(self._results_card)
        results_layout.setSpacing(32)
        self._wpm_label = QLabel()
        self._errors_label = QLabel()
        self._accuracy_label = QLabel()
        for label in (self._wpm_label, self._errors_label, self._accuracy_label):
            label.setAlignment(Qt.AlignCenter)
            label.setStyleSheet(f"color: {TypingColors.TEXT_SECONDARY}; font-size: 18px; font-weight: 700;")
            results_layout.addWidget(label)
        layout.addWidget(self._results_card)

        restart = QPushButton("Restart Test")
        restart.clicked.connect(self._restart)
        layout.addWidget(restart, 0, Qt.AlignCenter)

    def eventFilter(self, obj, event) -> bool:
        """Route the space key on the input box to the session instead of the text."""
        if obj == self.input_box and event.type() == event.Type.KeyPress:
            return self._on_key_press(event)
        return super().eventFilter(obj, event)

    def _on_key_press(self, event: QKeyEvent) -> bool:
        if event.key() != Qt.Key.Key_Space:
            return False
        self._session.press_space()
        return True

    def _on_text_edited(self, text: str) -> None:
        self._session.type_text(text)

    def _on_scroll(self) -> None:
        if self._word_window is not None:
            self._word_window.scroll_forward()

    def _select_duration(self, seconds: int, _checked: bool = False) -> None:
        if self._session.select_duration(seconds):
            self._word_window.reset_scroll()
        self.input_box.setFocus()

    def _restart(self) -> None:
        self._session.restart()
        self._word_window.reset_scroll()
        self.input_box.setFocus()

    def _render(self, view: SessionView) -> None:
        """Sync every widget with *view*."""
        self._word_window.set_cells(build_word_cells(view))

        if self.input_box.text() != view.input_buffer:
            self.input_box.setText(view.input_buffer)
        self.input_box.setEnabled(view.input_enabled)
        self.input_box.setPlaceholderText(placeholder_text(view))

        running = view.phase is Phase.RUNNING
        for seconds, button in self._duration_buttons.items():
            button.setChecked(seconds == view.duration)
            button.setEnabled(not running)

        self._countdown_label.setVisible(running)
        if running:
            self._countdown_label.set_remaining(view.remaining_seconds, view.duration)

        finished = view.phase is Phase.FINISHED
        self._results_card.setVisible(finished)
        if finished:
            self._wpm_label.setText(f"Your typing speed: {view.wpm} WPM")
            self._errors_label.setText(f"Errors: {view.error_count}")
            self._accuracy_label.setText(f"Accuracy: {view.accuracy}%")
