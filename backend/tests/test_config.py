"""
Tests for Application Configuration
"""

import pytest
from pydantic import ValidationError

from workwhiz.core.config import Settings, settings


class TestSettings:
    """Test suite for Settings"""

    def test_test_environment(self):
        """Test that the suite runs with ENVIRONMENT=test"""
        assert settings.ENVIRONMENT == "test"
        assert settings.is_production is False

    def test_defaults(self):
        """Test defaults relied on by the API and worker"""
        config = Settings()

        assert config.API_V1_PREFIX == "/api/v1"
        assert config.EMAIL_QUEUE_MAX_TRIES == 3
        assert config.ADMIN_SUBDOMAIN == "admin"
        assert config.EMPLOYER_SUBDOMAIN == "employer"
        assert config.CANDIDATE_SUBDOMAIN == "www"

    def test_log_level_is_normalized(self):
        """Test that log levels are upper-cased"""
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        """Test that unknown log levels fail validation"""
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="verbose")

    def test_environment_override(self, monkeypatch):
        """Test that settings are read from the environment"""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("EMAIL_QUEUE_MAX_TRIES", "5")

        config = Settings()

        assert config.is_production is True
        assert config.EMAIL_QUEUE_MAX_TRIES == 5

    def test_max_tries_must_be_positive(self):
        """Test that a job must be tried at least once"""
        with pytest.raises(ValidationError):
            Settings(EMAIL_QUEUE_MAX_TRIES=0)
