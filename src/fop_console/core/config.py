"""
Configuration Management

Centralized configuration management with YAML file support
and environment variable overrides.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file if it exists
load_dotenv()


DEFAULT_CONFIG_PATH = Path("config/default.yaml")


@dataclass
class DatabaseConfig:
    """Database configuration settings."""
    url: str = "sqlite:///prestashop.db"
    echo: bool = False
    pool_size: int = 5


@dataclass
class ExportConfig:
    """Configuration export/import settings."""
    default_file: str = "ps_configurations.json"
    indent: int = 4


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"  # Separate level for console output
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "logs/fop_console.log"
    max_size: str = "10MB"
    backup_count: int = 5


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "fop-console"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """Build configuration from a plain dictionary."""
        # Handle nested app configuration structure
        if 'app' in config_data:
            app_config = config_data.pop('app')
            config_data.update(app_config)

        config_data = cls._apply_env_overrides(config_data)

        try:
            return cls._build(config_data)
        except TypeError as e:
            raise ConfigurationError(f"Configuration instantiation failed: {e}") from e

    @classmethod
    def _build(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """Convert nested sections to their dataclasses."""
        if 'database' in config_data and isinstance(config_data['database'], dict):
            config_data['database'] = DatabaseConfig(**config_data['database'])

        if 'export' in config_data and isinstance(config_data['export'], dict):
            config_data['export'] = ExportConfig(**config_data['export'])

        if 'logging' in config_data and isinstance(config_data['logging'], dict):
            config_data['logging'] = LoggingConfig(**config_data['logging'])

        if isinstance(config_data.get('debug'), str):
            config_data['debug'] = config_data['debug'].lower() in ('1', 'true', 'yes', 'on')

        return cls(**config_data)

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'DATABASE_URL': ['database', 'url'],
            'LOG_LEVEL': ['logging', 'level'],
            'FOP_EXPORT_FILE': ['export', 'default_file'],
            'DEBUG': ['debug'],
            'ENVIRONMENT': ['environment'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = env_value

        return config_data


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            # Use default configuration (still honouring env overrides)
            _config = AppConfig.from_dict({})

    return _config


def set_config(config: AppConfig) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
