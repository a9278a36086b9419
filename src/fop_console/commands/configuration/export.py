"""
Configuration Export Command

Dumps configuration values from the ps_configuration table to a JSON file.
"""

import json
import sys
from pathlib import Path

import click
from rich.console import Console

from fop_console.core.database import get_db_session
from fop_console.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)

EXPORT_SERVICE_NAME = "fop.console.configuration.export.command"


@click.command()
@click.argument('keys', nargs=-1, required=True)
@click.option('--file', 'output_file', type=click.Path(dir_okay=False), default=None,
              help='File to dump to (default: ps_configurations.json)')
@click.option('--force', '-f', is_flag=True, help='Overwrite existing file')
@click.pass_context
def export(ctx, keys, output_file, force):
    """Export configuration values (from ps_configuration table).

    \b
    📤 EXAMPLES:

    fop configuration export PS_COUNTRY_DEFAULT
    fop configuration export PS_COMBINATION_FEATURE_ACTIVE PS_CUSTOMIZATION_FEATURE_ACTIVE
    fop configuration export --file configuration_blocksocial.json "BLOCKSOCIAL_%"

    \b
    💡 KEYS are configuration names, "PS_LANG_DEFAULT" for example.
    KEYS can also be mysql like values: "PSGDPR_%" exports all configurations
    starting with "PSGDPR_". The exported file can later be imported with
    `fop configuration import`. This command is not multishop, neither multilang.
    """
    config = ctx.obj.get('config') if ctx.obj else None
    if output_file is None:
        output_file = config.export.default_file if config else 'ps_configurations.json'
    indent = config.export.indent if config else 4
    output_path = Path(output_file)

    from fop_console.commands.registry import get_command
    command_name = get_command(EXPORT_SERVICE_NAME).name

    if output_path.exists() and not force and not click.confirm(f"Overwrite {output_path} ?", default=False):
        console.print(f"[yellow]// {command_name} command aborted, {output_path} not touched.[/yellow]")
        return

    try:
        from fop_console.storage.repositories import ConfigurationRepository

        to_export = {}
        with get_db_session() as session:
            repo = ConfigurationRepository(session)

            for key in keys:
                # keys to query with a 'like' syntax
                if '%' in key:
                    to_export.update(repo.get_like(key))
                    continue

                if not repo.has(key):
                    console.print(f"[yellow][WARNING] Configuration key not found '{key}' : ignored.[/yellow]")
                    logger.warning(
                        f"Configuration key not found: {key}",
                        extra={'command': command_name, 'configuration_key': key}
                    )
                    continue

                to_export[key] = repo.get(key)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(to_export, indent=indent), encoding='utf-8')

        logger.info(f"Exported {len(to_export)} configuration(s) to {output_path}")
        console.print(f"[green][OK] configuration(s) dumped to file '{output_path}'[/green]")

    except Exception as e:
        console.print(f"[red]Error exporting configuration: {str(e)}[/red]")
        logger.exception("Configuration export failed")
        sys.exit(1)
