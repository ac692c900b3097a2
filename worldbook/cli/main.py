"""CLI interface for the world book converter"""

import copy
import logging
from pathlib import Path
from typing import Optional, TextIO
import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from worldbook.models import WorldBook, EntryLevel
from worldbook.parser import DocumentParser, ParseError
from worldbook.export import JsonExporter, PlainTextExporter


# stdout carries converted output, everything else goes to stderr
console = Console(stderr=True)

DEFAULT_CONFIG = {
    "output": {
        "filename": "worldbook.json",
        "indent": 2,
        "ensure_ascii": False,
    },
    "logging": {
        "level": "WARNING",
    },
}

FORMAT_GUIDE = """\
[bold]Input format[/bold]

  • Separate regions with a line containing only [cyan]---[/cyan].
  • Start each region with a [cyan]## Region name[/cyan] title,
    followed by its overview and rules.
  • Start each location with a [cyan]### Location name[/cyan] title.

Regions become always-active entries keyed by their name.
Locations are keyed by their own name and their region name."""

EXAMPLE_DOCUMENT = """\
---
## China
*Overview: ...
*Climate: ...
*Index:
- Beijing
- ...

### Beijing
*Location: ...
*Description: ...
**Transport: ...

### Shanghai
*Location: ...
*Description: ...
"""


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from config.yaml, filling in defaults"""
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "config.yaml"
        if not config_path.exists():
            console.print(f"[yellow]Warning: Config file not found at {escape(str(config_path))}[/yellow]")
            return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise click.BadParameter(
            f"expected a mapping at the top level of {config_path}",
            param_hint="--config",
        )
    return _merge(DEFAULT_CONFIG, data)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def resolve_output_path(output: Path, config: dict) -> Path:
    """Use the configured file name when the output is a directory"""
    if output.is_dir():
        return output / config["output"]["filename"]
    return output


def print_summary(book: WorldBook, output_path: Path) -> None:
    regions = book.get_by_level(EntryLevel.REGION)
    locations = book.get_by_level(EntryLevel.LOCATION)

    console.print(Panel(
        f"[bold green]World book generated successfully![/bold green]\n\n"
        f"Saved to: [cyan]{escape(str(output_path))}[/cyan]",
        title="Success",
        border_style="green"
    ))

    table = Table(title="Entries")
    table.add_column("UID", style="dim")
    table.add_column("Label", style="cyan")
    table.add_column("Level", style="green")
    table.add_column("Keys")
    for entry in book.sorted_entries():
        table.add_row(str(entry.uid), escape(entry.comment), entry.level.value, escape(", ".join(entry.key)))
    console.print(table)
    console.print(f"[bold]{len(regions)}[/bold] regions, [bold]{len(locations)}[/bold] locations")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """World book converter - turn region/location notes into world book JSON"""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file or directory (prints to stdout when omitted)"
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"], case_sensitive=False),
    default="json",
    show_default=True,
    help="JSON world book or plain-text preview"
)
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to config file"
)
@click.option("--quiet", "-q", is_flag=True, help="Do not print the summary")
@click.pass_context
def convert(
    ctx: click.Context,
    input_file: TextIO,
    output: Optional[Path],
    output_format: str,
    config: Optional[Path],
    quiet: bool,
):
    """Convert INPUT_FILE (or - for stdin) into a world book"""
    app_config = load_config(config)
    configure_logging("DEBUG" if ctx.obj.get("verbose") else app_config["logging"]["level"])

    try:
        text = input_file.read()
    except UnicodeDecodeError as e:
        source = escape(str(getattr(input_file, "name", "input")))
        console.print(f"[red]Error: {source} is not valid UTF-8 ({escape(str(e))})[/red]")
        ctx.exit(1)
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    try:
        book = DocumentParser().parse_content(text)
    except ParseError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        ctx.exit(1)

    if output_format.lower() == "text":
        exporter = PlainTextExporter()
    else:
        exporter = JsonExporter(
            indent=app_config["output"]["indent"],
            ensure_ascii=app_config["output"]["ensure_ascii"],
        )

    if output is None:
        click.echo(exporter.export(book))
        return

    output_path = exporter.export_to_file(book, resolve_output_path(output, app_config))
    if not quiet:
        print_summary(book, output_path)


@main.command()
def guide():
    """Show the input format guide with an example"""
    out = Console()
    out.print(Panel(FORMAT_GUIDE, title="Format Guide", border_style="blue"))
    out.print("[bold]Example:[/bold]")
    out.print(escape(EXAMPLE_DOCUMENT), highlight=False)


if __name__ == "__main__":
    main()
