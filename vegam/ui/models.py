"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from vegam.core.session import SessionView


class WordStatus(Enum):
    CORRECT = "correct"
    CURRENT = "current"
    UPCOMING = "upcoming"


@dataclass
class WordCell:
    """UI state for one word in the visible window."""

    text: str
    status: WordStatus


def build_word_cells(view: SessionView) -> List[WordCell]:
    """Classify each visible word relative to the highlighted position."""
    cells: List[WordCell] = []
    for i, text in enumerate(view.visible_words):
        if i < view.highlight_index:
            status = WordStatus.CORRECT
        elif i == view.highlight_index:
            status = WordStatus.CURRENT
        else:
            status = WordStatus.UPCOMING
        cells.append(WordCell(text=text, status=status))
    return cells


def placeholder_text(view: SessionView) -> str:
    return "Start typing..." if view.input_enabled else "Test Finished!"
