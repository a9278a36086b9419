"""
CLI Entry Point

Main command-line interface for fop-console using the Click framework
with rich output formatting.
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from fop_console.core.config import get_config, reload_config
from fop_console.core.exceptions import FopConsoleException
from fop_console.commands.registry import COMMANDS, iter_domains
from fop_console.utils.logging import setup_logging, get_logger
from fop_console.utils.help_text import show_help_with_markdown

console = Console()
logger = get_logger(__name__)

GROUP_HELP = {
    'configuration': "Configuration values export/import commands.",
    'commands': "Registered commands checks.",
}


@click.group(invoke_without_command=True)
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--help', '-h', is_flag=True, expose_value=False, is_eager=True,
              callback=show_help_with_markdown, help='Show this message and exit')
@click.pass_context
def cli(ctx, config, verbose, debug):
    """fop - PrestaShop administration console"""

    ctx.ensure_object(dict)

    try:
        if config:
            app_config = reload_config(Path(config))
        else:
            app_config = get_config()

        if debug:
            app_config.debug = debug

        log_level = 'DEBUG' if (verbose or debug) else app_config.logging.level
        app_config.logging.level = log_level
        setup_logging(app_config)

        ctx.obj['config'] = app_config

    except Exception as e:
        console.print(f"[red]Error initializing application: {str(e)}[/red]")
        sys.exit(1)

    if ctx.invoked_subcommand is None:
        _display_banner()


def _display_banner():
    """Display application banner."""
    banner = Panel.fit(
        "[bold blue]fop-console[/bold blue]\n"
        "[dim]PrestaShop administration console[/dim]\n\n"
        "Use --help for available commands",
        title="🛒 fop",
        border_style="blue"
    )
    console.print(banner)


def _register_commands(root: click.Group) -> None:
    """Attach one group per command domain, built from the registry."""
    for group_name in iter_domains():
        group = click.Group(name=group_name, help=GROUP_HELP.get(group_name))
        for definition in COMMANDS:
            if definition.group_name == group_name:
                group.add_command(definition.command, name=definition.command_name)
        root.add_command(group)


_register_commands(cli)


def main():
    """Main entry point with comprehensive error handling."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except FopConsoleException as e:
        logger.error(f"Application error: {str(e)}")
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error: {str(e)}[/red]")
        sys.exit(1)


if __name__ == '__main__':
    main()
