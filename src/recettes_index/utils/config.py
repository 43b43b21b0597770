"""
Configuration management for the Recettes Index data-access layer.

This module handles:
- Data directory selection (development vs. production)
- Backend database URL (environment override or local SQLite file)
- SQL echo toggle for debugging
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import (
    APP_NAME,
    APP_VERSION,
    DATABASE_FILENAME,
    DATABASE_VERSION,
    ENV_DATABASE_URL,
    ENV_ENVIRONMENT,
    ENV_SQL_ECHO,
)

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


class Config:
    """
    Application configuration manager.

    The backend URL comes from RECETTES_INDEX_DATABASE_URL when set,
    otherwise a SQLite file inside the data directory is used.
    """

    def __init__(self, environment: str = "production", base_dir: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            environment: Environment mode - 'production' or 'development'
            base_dir: Optional data directory, overrides the environment default
        """
        self.environment = environment
        self._app_name = APP_NAME
        self._app_version = APP_VERSION
        self._database_version = DATABASE_VERSION

        if base_dir is not None:
            self._base_dir = Path(base_dir)
        elif environment == "development":
            self._base_dir = self._get_project_data_dir()
        else:
            self._base_dir = self._get_user_documents_dir()

        self._database_path = self._base_dir / DATABASE_FILENAME

    def _get_project_data_dir(self) -> Path:
        """Project data/ directory used during development."""
        project_root = Path(__file__).parent.parent.parent.parent
        return project_root / "data"

    def _get_user_documents_dir(self) -> Path:
        """User's Documents folder with an app subdirectory."""
        return Path.home() / "Documents" / "RecettesIndex"

    def ensure_directories(self) -> None:
        """Create the data directory if it doesn't exist."""
        self._base_dir.mkdir(parents=True, exist_ok=True)

    @property
    def app_name(self) -> str:
        """Application name."""
        return self._app_name

    @property
    def app_version(self) -> str:
        """Application version."""
        return self._app_version

    @property
    def database_version(self) -> str:
        """Database schema version."""
        return self._database_version

    @property
    def database_path(self) -> Path:
        """Full path to the local SQLite database file."""
        return self._database_path

    @property
    def database_url(self) -> str:
        """
        SQLAlchemy async database URL.

        Returns:
            RECETTES_INDEX_DATABASE_URL if set, else an aiosqlite URL
            pointing at the local database file
        """
        override = os.environ.get(ENV_DATABASE_URL)
        if override:
            return override

        # Use forward slashes for SQLite URL
        db_path_str = str(self._database_path).replace("\\", "/")
        return f"sqlite+aiosqlite:///{db_path_str}"

    @property
    def uses_local_database(self) -> bool:
        """True when the backend is the local SQLite file."""
        return not os.environ.get(ENV_DATABASE_URL)

    @property
    def sql_echo(self) -> bool:
        """Whether SQLAlchemy should log every statement."""
        return os.environ.get(ENV_SQL_ECHO, "").strip().lower() in _TRUTHY

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def database_exists(self) -> bool:
        """
        Check if the local database file exists.

        Remote backends are assumed to exist.
        """
        if not self.uses_local_database:
            return True
        return self._database_path.exists()

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(environment='{self.environment}', database_path='{self._database_path}')"


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(environment: Optional[str] = None) -> Config:
    """
    Get the global configuration instance.

    Once created, the singleton's environment cannot be changed by passing
    a different environment argument.

    Args:
        environment: Optional environment for initial creation. If None, uses
                    RECETTES_INDEX_ENV or defaults to production. Ignored if
                    singleton already exists.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        if environment is None:
            environment = os.environ.get(ENV_ENVIRONMENT, "production")
        _config_instance = Config(environment)
    elif environment is not None and environment != _config_instance.environment:
        logger.warning(
            f"get_config() called with environment='{environment}' but singleton "
            f"already exists with environment='{_config_instance.environment}'. "
            f"Returning existing singleton."
        )

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None


def get_database_url() -> str:
    """Get the backend database URL."""
    return get_config().database_url
