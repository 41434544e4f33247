"""QTimer-backed countdown clock."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QTimer

from vegam.core.clock import TickCallback


class QtClock(QObject):
    """One tick per second on the Qt event loop."""

    def __init__(self, interval_ms: int = 1000, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._callback: Optional[TickCallback] = None
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
