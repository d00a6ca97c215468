"""
Configuration constants for the reference index reconciler
"""
from pathlib import Path
from dataclasses import dataclass


@dataclass
class DatabaseConfig:
    """Reference index database configuration"""
    path: str = "/app/data/refindex.db"  # SQLite file holding sys_refindex
    busy_timeout_ms: int = 5000  # Wait for locks held by the index maintainer


@dataclass
class PathConfig:
    """File path configuration"""
    content_root: Path = Path("/app/site")  # ref_string paths are relative to this


@dataclass
class RefindexConfig:
    """Reference index update endpoint (owned by the index maintenance service)"""
    update_url: str = ""  # Empty disables refreshing
    update_timeout: float = 300.0


@dataclass
class LoggingConfig:
    """Log output configuration"""
    level: str = "INFO"


@dataclass
class Config:
    """Main configuration container"""
    database: DatabaseConfig
    paths: PathConfig
    refindex: RefindexConfig
    logging: LoggingConfig

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from environment - delegates to EnvironmentConfigLoader"""
        from environment_config_loader import EnvironmentConfigLoader
        return EnvironmentConfigLoader().load()

# Default instance
default_config = Config.from_env()
