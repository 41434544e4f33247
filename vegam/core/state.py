from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from vegam.core.config import ROW_SIZE
from vegam.core.words import Word


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


def row_start(index: int, row_size: int = ROW_SIZE) -> int:
    """First index of the row containing *index*."""
    return (index // row_size) * row_size


def window_at(words: List[Word], index: int, row_size: int = ROW_SIZE) -> List[Word]:
    """Two rows of words starting at the row that contains *index*."""
    start = row_start(index, row_size)
    return words[start:start + 2 * row_size]


@dataclass
class SessionState:
    """Everything that changes during one typing session."""

    words: List[Word]
    duration: int
    remaining_seconds: int
    phase: Phase = Phase.IDLE
    current_index: int = 0
    input_buffer: str = ""
    visible_window: List[Word] = field(default_factory=list)
    total_characters_typed: int = 0
    correct_characters: int = 0
    error_count: int = 0
    wpm: int = 0
    accuracy: int = 100

    @classmethod
    def fresh(cls, words: List[Word], duration: int, row_size: int = ROW_SIZE) -> "SessionState":
        words = list(words)
        return cls(
            words=words,
            duration=duration,
            remaining_seconds=duration,
            visible_window=window_at(words, 0, row_size),
        )

    @property
    def total_words(self) -> int:
        return len(self.words)

    def is_exhausted(self) -> bool:
        return self.current_index >= len(self.words)

    def current_word(self) -> Word:
        return self.words[self.current_index]
