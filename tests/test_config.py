"""Tests for configuration module."""

import pytest
from pydantic import ValidationError
from station_basket.core.config import Settings


class TestSettings:
    """Tests for Settings fields and validators."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default values when the environment is empty."""
        for name in ("STATIONS_DATA_PATH", "DEFAULT_DRAW_COUNT", "RANDOM_SEED", "LOG_LEVEL", "PACKAGE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.STATIONS_DATA_PATH is None
        assert config.DEFAULT_DRAW_COUNT == 10
        assert config.RANDOM_SEED is None
        assert config.LOG_LEVEL == "INFO"
        assert config.PACKAGE_LOG_LEVEL is None

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings are read from environment variables."""
        monkeypatch.setenv("STATIONS_DATA_PATH", "/data/stations.json")
        monkeypatch.setenv("DEFAULT_DRAW_COUNT", "5")
        monkeypatch.setenv("RANDOM_SEED", "42")
        monkeypatch.setenv("PACKAGE_LOG_LEVEL", "debug")

        config = Settings(_env_file=None)

        assert config.STATIONS_DATA_PATH == "/data/stations.json"
        assert config.DEFAULT_DRAW_COUNT == 5
        assert config.RANDOM_SEED == 42
        assert config.PACKAGE_LOG_LEVEL == "DEBUG"

    def test_draw_count_must_be_positive(self) -> None:
        """Test that DEFAULT_DRAW_COUNT rejects zero."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DEFAULT_DRAW_COUNT=0)

    def test_validate_log_level_normalizes_case(self) -> None:
        """Test that log level is upper-cased."""
        assert Settings.validate_log_level("debug") == "DEBUG"

    def test_validate_log_level_keeps_unset(self) -> None:
        """Test that an unset package log level stays unset."""
        assert Settings.validate_log_level(None) is None

    def test_validate_log_level_rejects_unknown(self) -> None:
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValueError, match="Invalid log level 'LOUD'"):
            Settings.validate_log_level("LOUD")

    def test_invalid_package_log_level_rejected(self) -> None:
        """Test that PACKAGE_LOG_LEVEL goes through the same validation."""
        with pytest.raises(ValidationError, match="Invalid log level 'chatty'"):
            Settings(_env_file=None, PACKAGE_LOG_LEVEL="chatty")
