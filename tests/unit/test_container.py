"""
Unit tests for the DI container and configuration.
"""
import pytest

from app.core.config import Settings
from app.di.base_container import BaseContainer


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_new_instance_each_time(self):
        container = BaseContainer()
        container.register_factory(list, lambda: [])
        assert container.get(list) is not container.get(list)

    def test_unknown_key_raises_value_error(self):
        with pytest.raises(ValueError, match="No dependency registered for dict"):
            BaseContainer().get(dict)


class TestSettings:
    """Tests for Settings"""

    def test_reads_environment(self, mock_env):
        settings = Settings()
        assert settings.mongo_database_name == "test_bloglist"
        assert settings.bcrypt_rounds == 4
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ["http://localhost:5173", "http://localhost:3000"]

    def test_defaults(self, monkeypatch):
        for name in ("MONGO_URI", "MONGO_DB_NAME", "BCRYPT_ROUNDS", "PORT", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.mongo_uri == "mongodb://localhost:27017"
        assert settings.bcrypt_rounds == 10
        assert settings.port == 3003
        assert settings.cors_origins == ["*"]
