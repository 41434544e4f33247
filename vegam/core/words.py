from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

import yaml

logger = logging.getLogger(__name__)

DEFAULT_VOCABULARY = Path(__file__).resolve().parent.parent / "data" / "words.yaml"


@dataclass(frozen=True)
class Word:
    text: str
    translation: Optional[str] = None


def shuffle_words(words: Sequence[Word], rng: Optional[random.Random] = None) -> List[Word]:
    """Return a Fisher–Yates shuffled copy of *words*; the source is left untouched."""
    rng = rng or random.Random()
    shuffled = list(words)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


class WordRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_VOCABULARY
        self._words = self._load_words()

    @property
    def path(self) -> Path:
        return self._path

    def all(self) -> List[Word]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def _load_words(self) -> List[Word]:
        if not self._path.exists():
            raise FileNotFoundError(f"Vocabulary file not found: {self._path}")

        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected YAML with a 'words' list")
        items = raw.get("words")
        if not isinstance(items, list):
            raise ValueError(f"{self._path.name}: missing or invalid 'words'")

        words: List[Word] = []
        for position, item in enumerate(items):
            if isinstance(item, dict):
                text = item.get("text")
                translation = item.get("translation")
                if translation is not None:
                    translation = str(translation).strip() or None
            else:
                text = item
                translation = None
            if text is None or not str(text).strip():
                raise ValueError(f"{self._path.name}: entry {position} has no 'text'")
            if len(str(text).split()) > 1:
                raise ValueError(f"{self._path.name}: entry {position} must be a single word")
            words.append(Word(text=str(text).strip(), translation=translation))

        if not words:
            raise ValueError(f"{self._path.name}: 'words' is empty")
        logger.info("Loaded %d words from %s", len(words), self._path)
        return words
