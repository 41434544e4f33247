"""Tests for vegam.core.config – session configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from vegam.core.config import (
    DURATIONS,
    SessionConfig,
    default_config_path,
    load_config,
    validate_duration,
)


# ---------------------------------------------------------------------------
# SessionConfig
# ---------------------------------------------------------------------------

class TestSessionConfig:
    def test_defaults(self):
        c = SessionConfig()
        assert c.default_duration == 60
        assert c.row_size == 10
        assert c.count_deletions is True
        assert c.count_partial_word is True
        assert c.vocabulary_path is None

    def test_invalid_duration(self):
        with pytest.raises(ValueError, match="Unsupported duration"):
            SessionConfig(default_duration=45)

    @pytest.mark.parametrize("row_size", [0, -1, True])
    def test_invalid_row_size(self, row_size):
        with pytest.raises(ValueError, match="row_size"):
            SessionConfig(row_size=row_size)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            SessionConfig().row_size = 5


class TestValidateDuration:
    def test_durations(self):
        assert DURATIONS == (15, 30, 60, 120)

    @pytest.mark.parametrize("seconds", DURATIONS)
    def test_accepts(self, seconds: int):
        assert validate_duration(seconds) == seconds

    def test_rejects(self):
        with pytest.raises(ValueError):
            validate_duration(61)

    @pytest.mark.parametrize("seconds", [60.0, True, "60"])
    def test_rejects_non_int(self, seconds):
        with pytest.raises(ValueError, match="Unsupported duration"):
            validate_duration(seconds)


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------

class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "config.yaml") == SessionConfig()

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == SessionConfig()

    def test_reads_values(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "default_duration: 30\nrow_size: 8\ncount_deletions: false\ncount_partial_word: false\n",
            encoding="utf-8",
        )
        c = load_config(path)
        assert c == SessionConfig(
            default_duration=30, row_size=8, count_deletions=False, count_partial_word=False
        )

    def test_relative_vocabulary_path(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("vocabulary_path: mine.yaml\n", encoding="utf-8")
        assert load_config(path).vocabulary_path == tmp_path / "mine.yaml"

    def test_absolute_vocabulary_path(self, tmp_path: Path):
        vocab = tmp_path / "elsewhere" / "words.yaml"
        path = tmp_path / "config.yaml"
        path.write_text(f"vocabulary_path: {vocab}\n", encoding="utf-8")
        assert load_config(path).vocabulary_path == vocab

    def test_bad_duration_names_file(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("default_duration: 45\n", encoding="utf-8")
        with pytest.raises(ValueError, match="config.yaml"):
            load_config(path)

    def test_float_duration_rejected(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("default_duration: 60.0\n", encoding="utf-8")
        with pytest.raises(ValueError, match="config.yaml"):
            load_config(path)

    def test_non_bool_flag(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("count_deletions: maybe\n", encoding="utf-8")
        with pytest.raises(ValueError, match="count_deletions"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_malformed_yaml_falls_back(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        path = tmp_path / "config.yaml"
        path.write_text("default_duration: [30\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            c = load_config(path)
        assert c == SessionConfig()
        assert "Could not load config" in caplog.text

    def test_unknown_key_ignored(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        path = tmp_path / "config.yaml"
        path.write_text("theme: dark\ndefault_duration: 15\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            c = load_config(path)
        assert c.default_duration == 15
        assert "theme" in caplog.text


class TestDefaultConfigPath:
    def test_home_location(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("VEGAM_CONFIG", raising=False)
        assert default_config_path() == Path.home() / ".vegam" / "config.yaml"

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        target = tmp_path / "custom.yaml"
        monkeypatch.setenv("VEGAM_CONFIG", str(target))
        assert default_config_path() == target

    def test_load_uses_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        target = tmp_path / "custom.yaml"
        target.write_text("default_duration: 120\n", encoding="utf-8")
        monkeypatch.setenv("VEGAM_CONFIG", str(target))
        assert load_config().default_duration == 120
