"""
Environment configuration loader.

Keeps environment variable access out of the Config dataclasses.
"""
import os
from pathlib import Path

from config import (
    Config, DatabaseConfig, PathConfig, RefindexConfig, LoggingConfig
)

class EnvironmentConfigLoader:
    """Loads configuration from environment variables.

    Single Responsibility: Environment access logic.
    """

    def load(self) -> Config:
        """Create Config from environment variables"""
        return Config(
            database=self._load_database_config(),
            paths=self._load_path_config(),
            refindex=self._load_refindex_config(),
            logging=self._load_logging_config()
        )

    def _load_database_config(self) -> DatabaseConfig:
        """Load database configuration from environment"""
        return DatabaseConfig(
            path=self._get_optional("REFINDEX_DB_PATH", DatabaseConfig.path),
            busy_timeout_ms=self._get_int("REFINDEX_BUSY_TIMEOUT_MS", DatabaseConfig.busy_timeout_ms)
        )

    def _load_path_config(self) -> PathConfig:
        """Load content root from environment"""
        return PathConfig(
            content_root=Path(self._get_optional("CONTENT_ROOT", str(PathConfig.content_root)))
        )

    def _load_refindex_config(self) -> RefindexConfig:
        """Load reference index update endpoint from environment"""
        return RefindexConfig(
            update_url=self._get_optional("REFINDEX_UPDATE_URL", ""),
            update_timeout=self._get_float("REFINDEX_UPDATE_TIMEOUT", RefindexConfig.update_timeout)
        )

    def _load_logging_config(self) -> LoggingConfig:
        """Load logging configuration from environment"""
        return LoggingConfig(
            level=self._get_optional("LOG_LEVEL", LoggingConfig.level).upper()
        )

    def _get_optional(self, key: str, default: str) -> str:
        """Get optional string environment variable"""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable"""
        value = os.getenv(key, str(default))
        return int(value)

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable"""
        value = os.getenv(key, str(default))
        return float(value)
