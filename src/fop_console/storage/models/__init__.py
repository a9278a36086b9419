"""
Storage Models

SQLAlchemy ORM models for the shop tables used by the console.
"""

from .configuration import Configuration

__all__ = [
    "Configuration",
]
