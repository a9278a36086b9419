"""
Command Registry

Every console command with the names it is known by: its class name
(``<Domain><Action>``), its invocation name (``fop:<domain>:<action>``) and its
service name (``fop.console.<domain>.<action>.command``). The CLI is built
from this registry and the naming check validates it.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

import click

from fop_console.core.exceptions import CommandNotFoundError
from fop_console.commands.check import check
from fop_console.commands.configuration import export, import_values


@dataclass(frozen=True)
class CommandDefinition:
    """A registered command."""
    domain: str
    class_name: str
    name: str
    service_name: str
    command: click.Command

    @property
    def group_name(self) -> str:
        """CLI group, e.g. ``configuration`` for ``fop:configuration:export``."""
        return self.name.split(':')[1]

    @property
    def command_name(self) -> str:
        """Name within the group, e.g. ``export`` for ``fop:configuration:export``."""
        return self.name.split(':', 2)[2]


COMMANDS: Tuple[CommandDefinition, ...] = (
    CommandDefinition(
        domain="Configuration",
        class_name="ConfigurationExport",
        name="fop:configuration:export",
        service_name="fop.console.configuration.export.command",
        command=export,
    ),
    CommandDefinition(
        domain="Configuration",
        class_name="ConfigurationImport",
        name="fop:configuration:import",
        service_name="fop.console.configuration.import.command",
        command=import_values,
    ),
    CommandDefinition(
        domain="Commands",
        class_name="CommandsCheck",
        name="fop:commands:check",
        service_name="fop.console.commands.check.command",
        command=check,
    ),
)

_BY_SERVICE_NAME: Dict[str, CommandDefinition] = {
    definition.service_name: definition for definition in COMMANDS
}


def get_command(service_name: str) -> CommandDefinition:
    """Look up a command by its service name."""
    try:
        return _BY_SERVICE_NAME[service_name]
    except KeyError:
        raise CommandNotFoundError(
            f"No command registered as '{service_name}'",
            service_name=service_name
        ) from None


def iter_domains() -> Iterator[str]:
    """Yield CLI group names in registration order, once each."""
    seen = set()
    for definition in COMMANDS:
        if definition.group_name not in seen:
            seen.add(definition.group_name)
            yield definition.group_name
