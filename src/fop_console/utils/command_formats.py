"""
Command Formats Validator

Checks that a registered command follows the naming convention: its class
name is ``<Domain><Action>``, its invocation name is
``fop:<domain>:<action>`` and its service name is
``fop.console.<domain>.<action>.command``. Multi-word domains and actions are
split on their uppercase letters, e.g. ``ModuleHooks`` gives ``module-hooks``.
"""

import re
from typing import List

from fop_console.utils.logging import get_logger

logger = get_logger(__name__)

COMMAND_NAME_PREFIX = "fop:"
SERVICE_NAME_PREFIX = "fop.console."
SERVICE_NAME_SUFFIX = ".command"

_WORD_BOUNDARY = re.compile(r"(?=[A-Z])")


def split_words(subject: str) -> List[str]:
    """Split a PascalCase identifier into words, each starting at an uppercase letter."""
    return [word for word in _WORD_BOUNDARY.split(subject) if word]


def _ucfirst(subject: str) -> str:
    return subject[:1].upper() + subject[1:]


def _pattern_words(subject: str) -> List[str]:
    return [re.escape(word.lower()) for word in split_words(subject)]


class CommandFormatsValidator:
    """
    Validates command naming and keeps every failure message.

    Messages accumulate across calls so that a whole registry can be checked
    before reading them; call ``clear()`` to start over.
    """

    def __init__(self):
        self._validation_messages: List[str] = []

    def validate(self, command_domain: str, command_class_name: str,
                 command_name: str, command_service_name: str) -> bool:
        """
        Validate one command against the naming convention.

        Args:
            command_domain: domain, e.g. Module
            command_class_name: command class name, e.g. ModuleHooks
            command_name: invocation name, e.g. fop:module:hooks
            command_service_name: registry service name, e.g. fop.console.module.hooks.command

        Returns:
            True when all names are valid. On failure only the first broken
            rule is reported.
        """
        if not command_domain:
            self._add_validation_message(command_class_name, "Domain can't be empty.")
            return False

        if not command_class_name.startswith(command_domain):
            self._add_validation_message(
                command_class_name,
                f"Domain {command_domain} must be included in command class name."
            )
            return False

        command_action = command_class_name[len(command_domain):]

        if not command_action:
            self._add_validation_message(command_class_name, "Action can't be empty.")
            return False

        command_domain = _ucfirst(command_domain)
        command_action = _ucfirst(command_action)

        if not self._is_command_name_valid(command_class_name, command_name, command_domain, command_action):
            return False

        if not self._is_command_service_name_valid(
                command_class_name, command_service_name, command_domain, command_action):
            return False

        return True

    def get_validation_messages(self) -> List[str]:
        """Return all messages recorded since construction or the last ``clear()``."""
        return list(self._validation_messages)

    def clear(self) -> None:
        self._validation_messages.clear()

    def _is_command_name_valid(self, command_class_name: str, command_name: str,
                               command_domain: str, command_action: str) -> bool:
        # fop:command-domain:command[:-]action
        expected_pattern = (
            COMMAND_NAME_PREFIX
            + '-'.join(_pattern_words(command_domain))
            + ':'
            + '[:-]'.join(_pattern_words(command_action))
        )

        if re.fullmatch(expected_pattern, command_name) is None:
            self._add_validation_message(
                command_class_name,
                "Wrong format for command class name.\n"
                f"Expected = {expected_pattern}\n"
                f"Actual = {command_name}"
            )
            return False

        return True

    def _is_command_service_name_valid(self, command_class_name: str, command_service_name: str,
                                       command_domain: str, command_action: str) -> bool:
        # fop.console.command_domain.command[._]action.command
        expected_pattern = (
            re.escape(SERVICE_NAME_PREFIX)
            + '_'.join(_pattern_words(command_domain))
            + r'\.'
            + r'[._]'.join(_pattern_words(command_action))
            + re.escape(SERVICE_NAME_SUFFIX)
        )

        if re.fullmatch(expected_pattern, command_service_name) is None:
            self._add_validation_message(
                command_class_name,
                "Wrong format for command service name.\n"
                f"Expected = {expected_pattern}\n"
                f"Actual = {command_service_name}"
            )
            return False

        return True

    def _add_validation_message(self, command: str, message: str) -> None:
        logger.debug(f"Naming check failed for {command}: {message}")
        self._validation_messages.append(f"[{command}] => {message}")
