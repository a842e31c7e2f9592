"""Tests for settings and logging setup."""

import logging

from reverse_pattern.core import Settings, configure_logging, get_settings


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()
        assert settings.random_source == "mersenne"
        assert settings.default_seed is None
        assert settings.max_occurrences_limit is None

    def test_env_override(self, monkeypatch):
        """Test REVERSE_PATTERN_ variables override defaults."""
        monkeypatch.setenv("REVERSE_PATTERN_DEFAULT_SEED", "42")
        monkeypatch.setenv("REVERSE_PATTERN_MAX_OCCURRENCES_LIMIT", "50")
        get_settings.cache_clear()

        settings = get_settings()
        assert settings.default_seed == 42
        assert settings.max_occurrences_limit == 50

    def test_cached(self):
        """Test get_settings returns the cached instance."""
        assert get_settings() is get_settings()


class TestLogging:
    """Test logging configuration."""

    def test_configure_level(self):
        """Test the package logger takes the requested level."""
        logger = configure_logging("debug")
        assert logger.name == "reverse_pattern"
        assert logger.level == logging.DEBUG
        assert logger.handlers

    def test_configure_idempotent(self):
        """Test repeated configuration adds a single handler."""
        logger = configure_logging("info")
        count = len(logger.handlers)
        configure_logging("info")
        assert len(logger.handlers) == count
