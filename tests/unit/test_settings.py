"""
Tests for Settings configuration class.
"""

import pytest
from pydantic import ValidationError

from note_search.config import Settings, settings


class TestSettings:
    """Tests for Settings class."""

    def test_settings_instance_exists(self):
        """Test that global settings instance exists."""
        assert settings is not None
        assert isinstance(settings, Settings)

    def test_defaults(self):
        """Test defaults without environment overrides."""
        s = Settings(_env_file=None)

        assert s.case_sensitive is False
        assert s.use_stemming is False
        assert s.use_synonyms is False
        assert s.suggestion_limit == 10
        assert s.recency_days == 7
        assert s.search_workers >= 1
        assert s.log_file is None

    def test_environment_override(self, monkeypatch):
        """Test loading values from environment variables."""
        monkeypatch.setenv("SUGGESTION_LIMIT", "3")
        monkeypatch.setenv("CASE_SENSITIVE", "true")

        s = Settings(_env_file=None)

        assert s.suggestion_limit == 3
        assert s.case_sensitive is True

    def test_env_file(self, tmp_path):
        """Test loading values from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("RECENCY_DAYS=14\nLOG_LEVEL=DEBUG\n")

        s = Settings(_env_file=env_file)

        assert s.recency_days == 14
        assert s.log_level == "DEBUG"

    def test_invalid_workers(self):
        """Test validation of worker count."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, search_workers=0)
