"""Derived speed and accuracy metrics for a finished session."""

from __future__ import annotations

import math
from dataclasses import dataclass

from vegam.core.state import SessionState


@dataclass(frozen=True)
class SessionResult:
    """Frozen outcome of a session, captured at the moment it finishes."""

    wpm: int
    accuracy: int
    errors: int
    words_typed: int
    duration: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def words_typed(current_index: int, total_words: int, count_partial_word: bool = True) -> int:
    """Words credited at the end of a session.

    With ``count_partial_word`` the word being typed when the session ended is
    credited as well, capped at the number of words available.
    """
    typed = current_index + 1 if count_partial_word else current_index
    return max(0, min(typed, total_words))


def calculate_wpm(typed_words: int, duration: int) -> int:
    """Words per minute over the full configured *duration* (seconds)."""
    if duration <= 0:
        return 0
    return round_half_up(typed_words / (duration / 60.0))


def calculate_accuracy(correct_characters: int, total_characters: int) -> int:
    """Percentage of judged-correct keystrokes; 0 when nothing was typed."""
    if total_characters <= 0:
        return 0
    ratio = correct_characters / total_characters
    return max(0, min(100, round_half_up(ratio * 100.0)))


class MetricsCalculator:
    def __init__(self, count_partial_word: bool = True) -> None:
        self._count_partial_word = count_partial_word

    def freeze(self, state: SessionState) -> SessionResult:
        """Write ``wpm`` and ``accuracy`` onto *state* and return the result."""
        typed = words_typed(state.current_index, len(state.words), self._count_partial_word)
        state.wpm = calculate_wpm(typed, state.duration)
        state.accuracy = calculate_accuracy(state.correct_characters, state.total_characters_typed)
        return SessionResult(
            wpm=state.wpm,
            accuracy=state.accuracy,
            errors=state.error_count,
            words_typed=typed,
            duration=state.duration,
        )
