from __future__ import annotations

from typing import Callable, Optional, Protocol

TickCallback = Callable[[], None]


class Clock(Protocol):
    """A repeating one-second tick source owned by a :class:`TypingSession`."""

    @property
    def active(self) -> bool: ...

    def start(self, callback: TickCallback) -> None: ...

    def stop(self) -> None: ...


class ManualClock:
    """Clock driven by explicit :meth:`fire` calls instead of wall time."""

    def __init__(self) -> None:
        self._callback: Optional[TickCallback] = None
        self.starts = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self.starts += 1

    def stop(self) -> None:
        self._callback = None

    def fire(self, times: int = 1) -> None:
        """Deliver *times* ticks, stopping early once the clock is stopped."""
        for _ in range(times):
            if self._callback is None:
                return
            self._callback()
