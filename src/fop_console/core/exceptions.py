"""
Custom Exception Classes

Application-specific exception classes for better error handling
across the console commands.
"""

from typing import Optional, Any, Dict


class FopConsoleException(Exception):
    """Base exception class for all fop-console errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(FopConsoleException):
    """Raised when there's an issue with application configuration."""
    pass


class DatabaseError(FopConsoleException):
    """Raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 table: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.operation = operation
        self.table = table


class CommandNotFoundError(FopConsoleException):
    """Raised when a service name is not present in the command registry."""

    def __init__(self, message: str, service_name: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.service_name = service_name


class ConfigurationImportError(FopConsoleException):
    """Raised when a configuration file can't be imported."""

    def __init__(self, message: str, file_path: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.file_path = file_path
