"""
Utils Module

Logging configuration, help rendering and the command naming validator.
"""

from .logging import setup_logging, get_logger
from .command_formats import CommandFormatsValidator, split_words
from .help_text import show_help_with_markdown

__all__ = [
    "setup_logging",
    "get_logger",
    "CommandFormatsValidator",
    "split_words",
    "show_help_with_markdown"
]
