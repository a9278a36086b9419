"""
Configuration Import Command

Loads a JSON file produced by `fop configuration export` back into the
ps_configuration table.
"""

import json
import sys
from pathlib import Path
from typing import Dict, Optional

import click
from rich.console import Console

from fop_console.core.database import get_db_session
from fop_console.core.exceptions import ConfigurationImportError
from fop_console.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command(name='import')
@click.option('--file', 'input_file', type=click.Path(dir_okay=False), default=None,
              help='File to import from (default: ps_configurations.json)')
@click.pass_context
def import_values(ctx, input_file):
    """Import configuration values (into ps_configuration table).

    \b
    📥 EXAMPLES:

    fop configuration import
    fop configuration import --file configuration_blocksocial.json

    \b
    💡 Reads a file written by `fop configuration export` and saves every
    value. Missing keys are created. This command is not multishop, neither multilang.
    """
    config = ctx.obj.get('config') if ctx.obj else None
    if input_file is None:
        input_file = config.export.default_file if config else 'ps_configurations.json'
    input_path = Path(input_file)

    try:
        values = load_configuration_file(input_path)

        from fop_console.storage.repositories import ConfigurationRepository

        with get_db_session() as session:
            repo = ConfigurationRepository(session)
            for key, value in values.items():
                repo.set(key, value)
                logger.debug(f"Imported configuration {key}", extra={'configuration_key': key})

        logger.info(f"Imported {len(values)} configuration(s) from {input_path}")
        console.print(f"[green][OK] {len(values)} configuration(s) imported from '{input_path}'[/green]")

    except Exception as e:
        console.print(f"[red]Error importing configuration: {str(e)}[/red]")
        logger.exception("Configuration import failed")
        sys.exit(1)


def load_configuration_file(input_path: Path) -> Dict[str, Optional[str]]:
    """
    Read an exported configuration file.

    Args:
        input_path: JSON file holding an object of name => value

    Returns:
        Mapping of name to database value (string or None)

    Raises:
        ConfigurationImportError: If the file is missing or malformed
    """
    if not input_path.exists():
        raise ConfigurationImportError(f"File not found: {input_path}", file_path=str(input_path))

    try:
        data = json.loads(input_path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ConfigurationImportError(f"Invalid JSON in {input_path}: {e}", file_path=str(input_path)) from e

    if not isinstance(data, dict):
        raise ConfigurationImportError(
            f"Expected a JSON object in {input_path}, got {type(data).__name__}",
            file_path=str(input_path)
        )

    values = {}
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            raise ConfigurationImportError(
                f"Value of '{key}' must be a scalar, got {type(value).__name__}",
                file_path=str(input_path)
            )
        values[key] = _to_db_value(value)

    return values


def _to_db_value(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return '1' if value else '0'
    return str(value)
