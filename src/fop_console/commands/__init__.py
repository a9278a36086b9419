"""
Commands Module

Command-line interface commands for fop-console.
"""

from .registry import COMMANDS, CommandDefinition, get_command, iter_domains

__all__ = ['COMMANDS', 'CommandDefinition', 'get_command', 'iter_domains']
