"""Typing test UI: the two-row word window and the countdown label."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEasingCurve, QRectF, Qt, QVariantAnimation
from PySide6.QtGui import QColor, QFontMetrics, QPainter, QPen
from PySide6.QtWidgets import QLabel, QWidget

from vegam.core.config import ROW_SIZE
from vegam.ui.colors import TypingColors, timer_color
from vegam.ui.models import WordCell, WordStatus


class WordWindowWidget(QWidget):
    """Two rows of words: typed (green), current (teal pill), upcoming (gray)."""

    def __init__(self, row_size: int = ROW_SIZE, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._row_size = row_size
        self._cells: list[WordCell] = []
        self._scroll_offset: float = 0.0
        self._scroll_anim = QVariantAnimation(self)
        self._scroll_anim.setDuration(180)
        self._scroll_anim.setEasingCurve(QEasingCurve.OutCubic)
        self._scroll_anim.valueChanged.connect(self._on_scroll_value)
        self.setMinimumHeight(120)
        self.setMinimumWidth(600)

    def set_cells(self, cells: list[WordCell]) -> None:
        self._cells = list(cells)
        self.update()

    def scroll_forward(self) -> None:
        """Slide the freshly aligned rows up by one row height."""
        self._scroll_anim.stop()
        self._scroll_anim.setStartValue(float(self._row_height()))
        self._scroll_anim.setEndValue(0.0)
        self._scroll_anim.start()

    def reset_scroll(self) -> None:
        self._scroll_anim.stop()
        self._scroll_offset = 0.0
        self.update()

    def _row_height(self) -> int:
        return self.height() // 2

    def _on_scroll_value(self, value) -> None:
        self._scroll_offset = float(value)
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        if not self._cells:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        font = painter.font()
        font.setPointSize(16)
        painter.setFont(font)
        metrics = QFontMetrics(font)
        spacing = metrics.horizontalAdvance(" ") * 2
        row_h = self._row_height()

        for row in range(0, len(self._cells), self._row_size):
            chunk = self._cells[row:row + self._row_size]
            widths = [metrics.horizontalAdvance(c.text) for c in chunk]
            total = sum(widths) + spacing * (len(chunk) - 1)
            x = max(0.0, (self.width() - total) / 2)
            y = (row // self._row_size) * row_h + self._scroll_offset
            for cell, w in zip(chunk, widths):
                rect = QRectF(x, y, w, row_h)
                if cell.status is WordStatus.CURRENT:
                    pill = rect.adjusted(-6, row_h * 0.2, 6, -row_h * 0.2)
                    painter.setPen(QPen(QColor(TypingColors.PRIMARY), 2))
                    painter.setBrush(QColor(TypingColors.WORD_CURRENT_BG))
                    painter.drawRoundedRect(pill, 8, 8)
                    painter.setPen(QColor(TypingColors.PRIMARY_DARK))
                elif cell.status is WordStatus.CORRECT:
                    painter.setPen(QColor(TypingColors.WORD_CORRECT))
                else:
                    painter.setPen(QColor(TypingColors.WORD_UPCOMING))
                painter.drawText(rect, Qt.AlignCenter, cell.text)
                x += w + spacing


class CountdownLabel(QLabel):
    """Remaining seconds, tinted from teal to coral as time runs out."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)

    def set_remaining(self, remaining_seconds: int, duration: int) -> None:
        color = timer_color(remaining_seconds, duration)
        self.setText(f"Time remaining: {remaining_seconds}s")
        self.setStyleSheet(f"QLabel {{ color: {color}; font-size: 20px; font-weight: 700; }}")
