"""Keystroke judging and word progression for a running session."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from vegam.core.config import ROW_SIZE
from vegam.core.state import SessionState, row_start, window_at

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordAdvance:
    """Outcome of a word-boundary (space) signal."""

    advanced: bool = False
    scrolled: bool = False
    exhausted: bool = False
    suppress_space: bool = True


class InputMatcher:
    """Judges the most recently typed character of the input buffer.

    Only the last position is compared against the target word, earlier
    characters are not re-checked. Every buffer change counts as one typed
    character, including deletions, unless ``count_deletions`` is off, in
    which case a deletion is neither counted nor judged.
    """

    def __init__(self, count_deletions: bool = True) -> None:
        self._count_deletions = count_deletions

    def apply(self, state: SessionState, new_buffer: str) -> None:
        is_deletion = len(new_buffer) < len(state.input_buffer)
        if is_deletion and not self._count_deletions:
            state.input_buffer = new_buffer
            return

        state.total_characters_typed += 1
        if new_buffer and not state.is_exhausted():
            target = state.current_word().text
            position = len(new_buffer) - 1
            if position < len(target) and new_buffer[position] == target[position]:
                state.correct_characters += 1
            else:
                state.error_count += 1
                logger.debug("Mismatch at %d: %r vs %r", position, new_buffer[position], target)

        state.input_buffer = new_buffer


class ProgressionController:
    def __init__(self, row_size: int = ROW_SIZE) -> None:
        self._row_size = row_size

    def advance(self, state: SessionState) -> WordAdvance:
        """Move to the next word if the buffer matches the current one."""
        if state.is_exhausted():
            return WordAdvance()
        if state.input_buffer.strip() != state.current_word().text:
            return WordAdvance()

        state.current_index += 1
        state.input_buffer = ""

        scrolled = False
        if state.current_index > 0 and state.current_index % self._row_size == 0:
            state.visible_window = window_at(state.words, state.current_index, self._row_size)
            scrolled = True
            logger.debug(
                "Window moved to row starting at %d",
                row_start(state.current_index, self._row_size),
            )

        return WordAdvance(advanced=True, scrolled=scrolled, exhausted=state.is_exhausted())
