"""
Command Naming Check

Runs the naming convention validator over every registered command.
"""

import sys

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from fop_console.utils.command_formats import CommandFormatsValidator
from fop_console.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
def check():
    """Check that registered commands follow the naming convention.

    \b
    🔍 EXAMPLES:

    fop commands check

    \b
    💡 Every command must be named <Domain><Action>, invoked as
    fop:<domain>:<action> and registered as fop.console.<domain>.<action>.command.
    """
    from fop_console.commands.registry import COMMANDS

    validator = CommandFormatsValidator()

    results_table = Table(title="Command Naming")
    results_table.add_column("Command", style="cyan")
    results_table.add_column("Status", justify="center")
    results_table.add_column("Message", style="dim")

    all_passed = True
    for definition in COMMANDS:
        before = len(validator.get_validation_messages())
        valid = validator.validate(
            definition.domain,
            definition.class_name,
            definition.name,
            definition.service_name
        )
        message = "" if valid else validator.get_validation_messages()[before]

        if not valid:
            all_passed = False
            logger.warning(message)

        status = "[green]✓ PASS[/green]" if valid else "[red]✗ FAIL[/red]"
        results_table.add_row(definition.name, status, message)

    console.print(results_table)

    if all_passed:
        console.print(Panel(
            f"[green]✓ All {len(COMMANDS)} command(s) follow the naming convention.[/green]",
            title="🔍 Naming Check",
            border_style="green"
        ))
    else:
        console.print(Panel(
            f"[red]✗ {len(validator.get_validation_messages())} command(s) break the naming convention.[/red]",
            title="🔍 Naming Check",
            border_style="red"
        ))
        sys.exit(1)
