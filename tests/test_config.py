"""Tests for configuration management."""

from pathlib import Path

from recettes_index.utils.config import Config, get_config, get_database_url, reset_config


class TestConfig:
    """Tests for the Config class."""

    def test_default_url_points_at_local_sqlite(self, tmp_path):
        config = Config("development", base_dir=tmp_path)
        assert config.database_url == f"sqlite+aiosqlite:///{tmp_path.as_posix()}/recettes_index.db"
        assert config.uses_local_database

    def test_url_override_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RECETTES_INDEX_DATABASE_URL", "postgresql+asyncpg://u:p@db/recettes")
        config = Config(base_dir=tmp_path)
        assert config.database_url == "postgresql+asyncpg://u:p@db/recettes"
        assert not config.uses_local_database
        assert config.database_exists()

    def test_sql_echo(self, tmp_path, monkeypatch):
        config = Config(base_dir=tmp_path)
        assert config.sql_echo is False
        monkeypatch.setenv("RECETTES_INDEX_SQL_ECHO", "yes")
        assert config.sql_echo is True

    def test_development_uses_project_data_dir(self):
        config = Config("development")
        assert config.is_development
        assert config.database_path.parent.name == "data"

    def test_production_uses_documents_dir(self):
        config = Config("production")
        assert config.is_production
        assert config.database_path.parent == Path.home() / "Documents" / "RecettesIndex"

    def test_ensure_directories(self, tmp_path):
        base_dir = tmp_path / "nested" / "data"
        config = Config(base_dir=base_dir)
        assert not config.database_exists()
        config.ensure_directories()
        assert base_dir.is_dir()


class TestGetConfig:
    """Tests for the configuration singleton."""

    def test_singleton(self):
        assert get_config() is get_config()

    def test_environment_variable_selects_environment(self, monkeypatch):
        monkeypatch.setenv("RECETTES_INDEX_ENV", "development")
        reset_config()
        assert get_config().is_development

    def test_environment_cannot_change_after_creation(self):
        first = get_config("production")
        assert get_config("development") is first
        assert first.is_production

    def test_get_database_url(self, monkeypatch):
        monkeypatch.setenv("RECETTES_INDEX_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        assert get_database_url() == "sqlite+aiosqlite:///:memory:"
