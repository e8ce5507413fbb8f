"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from chat_config import Settings, clear_settings_cache, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.seed_enabled is True
        assert settings.seed_user_count == 9
        assert settings.seed_conversation_count == 10
        assert settings.seed_message_count == 100
        assert settings.seed_user_password.get_secret_value() == "password"
        assert settings.persistence_backend == "sqlalchemy"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SEED_ENABLED", "0")
        monkeypatch.setenv("SEED_MESSAGE_COUNT", "7")

        settings = Settings()

        assert settings.seed_enabled is False
        assert settings.seed_message_count == 7

    def test_negative_count_rejected(self, monkeypatch):
        monkeypatch.setenv("SEED_USER_COUNT", "-1")

        with pytest.raises(ValidationError):
            Settings()

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValidationError):
            Settings(persistence_backend="redis")

    def test_password_is_secret(self):
        assert "password" not in repr(Settings().seed_user_password)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_clear_cache_rereads_environment(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("SEED_USER_COUNT", "2")
        clear_settings_cache()

        assert get_settings() is not first
        assert get_settings().seed_user_count == 2
