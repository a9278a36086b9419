"""
Storage Repositories

Data access classes for the shop tables.
"""

from .configuration_repository import ConfigurationRepository

__all__ = [
    "ConfigurationRepository",
]
