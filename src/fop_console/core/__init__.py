"""
Core Module

Foundational components used across the application including configuration
management, database connections, and custom exceptions.
"""

from .config import get_config, AppConfig
from .exceptions import (
    FopConsoleException,
    ConfigurationError,
    DatabaseError,
    CommandNotFoundError,
    ConfigurationImportError,
)

__all__ = [
    "get_config",
    "AppConfig",
    "FopConsoleException",
    "ConfigurationError",
    "DatabaseError",
    "CommandNotFoundError",
    "ConfigurationImportError",
]
