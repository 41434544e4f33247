"""Session configuration loaded from ``~/.vegam/config.yaml``."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DURATIONS = (15, 30, 60, 120)
ROW_SIZE = 10


@dataclass(frozen=True)
class SessionConfig:
    """Tunables for a typing session.

    ``count_deletions`` and ``count_partial_word`` keep the scoring of the
    classic web test: a keystroke that removes text still counts as typed, and
    the word in progress when time runs out counts towards WPM.
    """

    default_duration: int = 60
    row_size: int = ROW_SIZE
    count_deletions: bool = True
    count_partial_word: bool = True
    vocabulary_path: Optional[Path] = None

    def __post_init__(self) -> None:
        validate_duration(self.default_duration)
        if not isinstance(self.row_size, int) or isinstance(self.row_size, bool) or self.row_size < 1:
            raise ValueError(f"row_size must be a positive integer, got {self.row_size!r}")


def validate_duration(seconds: int) -> int:
    if not isinstance(seconds, int) or isinstance(seconds, bool) or seconds not in DURATIONS:
        allowed = ", ".join(str(d) for d in DURATIONS)
        raise ValueError(f"Unsupported duration {seconds!r}; choose one of {allowed}")
    return seconds


def default_config_path() -> Path:
    override = os.environ.get("VEGAM_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".vegam" / "config.yaml"


def load_config(path: Optional[Path] = None) -> SessionConfig:
    """Read a :class:`SessionConfig` from YAML, falling back to defaults.

    A missing or unreadable file yields the defaults. Values that parse but
    are out of range raise ``ValueError`` naming the file.
    """
    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        return SessionConfig()
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Could not load config from %s: %s", config_path, e)
        return SessionConfig()

    if raw is None:
        return SessionConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path.name}: expected a YAML mapping")

    known = {f.name for f in fields(SessionConfig)}
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            logger.warning("Ignoring unknown config key %r in %s", key, config_path)
            continue
        values[key] = value
    if values.get("vocabulary_path") is not None:
        vocab = Path(str(values["vocabulary_path"])).expanduser()
        if not vocab.is_absolute():
            vocab = config_path.parent / vocab
        values["vocabulary_path"] = vocab
    for flag in ("count_deletions", "count_partial_word"):
        if flag in values and not isinstance(values[flag], bool):
            raise ValueError(f"{config_path.name}: '{flag}' must be true or false")

    try:
        config = SessionConfig(**values)
    except ValueError as e:
        raise ValueError(f"{config_path.name}: {e}") from e
    logger.info("Loaded config from %s", config_path)
    return config
