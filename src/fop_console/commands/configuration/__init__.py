"""
Configuration Commands Package

Commands moving ps_configuration values to and from JSON files:
- export.py - Dump values to a file
- import_values.py - Load values from a file
"""

from .export import export
from .import_values import import_values

__all__ = [
    'export',
    'import_values'
]
