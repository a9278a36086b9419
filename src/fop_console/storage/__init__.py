"""
Storage Module

Data persistence and access layer with SQLAlchemy ORM model definitions
and the repository pattern for data access.
"""

from .models import Configuration
from .repositories import ConfigurationRepository

__all__ = [
    "Configuration",
    "ConfigurationRepository",
]
