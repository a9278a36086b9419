from rich.console import Console
from rich.markdown import Markdown

console = Console()

def show_help_with_markdown(ctx, param, value):
    """Custom help callback that renders help text using Rich markdown"""
    if not value or ctx.resilient_parsing:
        return

    markdown_help = """
# fop - PrestaShop administration console

## 🚀 QUICK START EXAMPLES

```bash
fop configuration export PS_LANG_DEFAULT PS_COUNTRY_DEFAULT
fop configuration export --file configuration_blocksocial.json "BLOCKSOCIAL_%"
fop configuration import --file configuration_blocksocial.json
fop commands check
```

## 💡 TIP
- Use `fop COMMAND --help` for detailed options on any command.

## Options
- `--config, -c PATH`: Configuration file path
- `--verbose, -v`: Enable verbose logging
- `--debug`: Enable debug mode
- `--help`: Show this message and exit

## Commands
- commands       Registered command checks.
- configuration  Configuration values export/import.
"""

    console.print(Markdown(markdown_help))
    ctx.exit()
