"""Command-line interface for RDF MUD."""

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from rdf_mud import __version__

console = Console()

FORMAT_CHOICE = click.Choice(["turtle", "n-triples", "n-quads", "trig"])


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """RDF MUD - a text adventure whose world is an RDF graph."""
    from pydantic import ValidationError

    from rdf_mud.config import get_settings

    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        sys.exit(1)

    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@main.command()
def play() -> None:
    """Play the sample world interactively."""
    from rdf_mud.mud import CommandProcessor, create_simple_world

    world, player_id = create_simple_world()
    processor = CommandProcessor()

    console.rule("[bold]Welcome to the RDF-Powered MUD[/bold]")
    console.print("Type [cyan]help[/cyan] for a list of commands, [cyan]export[/cyan] to see the world as RDF, "
                  "or [cyan]quit[/cyan] to exit.")
    console.print(processor.process_command(world, player_id, "look").message, markup=False)

    while True:
        try:
            line = console.input("\n[bold]>[/bold] ").strip()
        except (EOFError, KeyboardInterrupt):
            break

        if line.lower() in ("quit", "exit"):
            break

        if line.lower() == "export":
            console.rule("RDF World State (Turtle)")
            console.print(asyncio.run(world.export_world()), markup=False, highlight=False)
            console.rule("End of RDF")
            continue

        if line:
            result = processor.process_command(world, player_id, line)
            style = None if result.success else "yellow"
            console.print(result.message, style=style, markup=False)

    console.print("\nThanks for playing! Goodbye.")


@main.command()
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Output format (default from config)")
@click.option("--output", "-o", type=click.Path(), help="Write to a file instead of stdout")
def export(fmt: str | None, output: str | None) -> None:
    """Serialize the sample world."""
    from rdf_mud.config import get_settings
    from rdf_mud.models import SerializationOptions
    from rdf_mud.mud import create_simple_world
    from rdf_mud.rdf import RDFStoreError

    world, _ = create_simple_world()
    options = SerializationOptions(format=fmt or get_settings().default_format)

    try:
        text = asyncio.run(world.store.serialize(options))
    except RDFStoreError as e:
        console.print(f"[red]Export failed:[/red] {escape(str(e))}")
        sys.exit(1)

    _emit(text, output)


@main.command()
def stats() -> None:
    """Show statistics for the sample world."""
    from rdf_mud.mud import EntityKind, create_simple_world

    world, _ = create_simple_world()
    store_stats = world.store.stats()

    table = Table(title="World Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Triples", f"{store_stats.triple_count:,}")
    table.add_row("Subjects", f"{store_stats.subject_count:,}")
    table.add_row("Predicates", f"{store_stats.predicate_count:,}")
    table.add_row("Named graphs", f"{store_stats.graph_count:,}")
    for kind in EntityKind:
        table.add_row(f"{kind.value.title()}s", f"{len(world.list_entities(kind)):,}")

    console.print(table)


@main.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--from", "source_format", type=FORMAT_CHOICE, default="turtle", help="Input format")
@click.option("--to", "target_format", type=FORMAT_CHOICE, default="n-triples", help="Output format")
@click.option("--output", "-o", type=click.Path(), help="Write to a file instead of stdout")
def convert(path: str, source_format: str, target_format: str, output: str | None) -> None:
    """Convert an RDF file between formats."""
    from rdf_mud.models import SerializationOptions
    from rdf_mud.rdf import ParseError, RDFDatastore, RDFStoreError

    store = RDFDatastore()
    text = Path(path).read_text(encoding="utf-8")

    async def run() -> str:
        await store.parse(text, source_format)
        return await store.serialize(SerializationOptions(format=target_format))

    try:
        result = asyncio.run(run())
    except ParseError as e:
        console.print(f"[red]Could not parse {escape(path)}:[/red] {escape(str(e))}")
        sys.exit(1)
    except RDFStoreError as e:
        console.print(f"[red]Conversion failed:[/red] {escape(str(e))}")
        sys.exit(1)

    _emit(result, output)
    if output:
        console.print(f"[green]✓[/green] Converted {store.size():,} statements to {target_format}")


def _emit(text: str, output: str | None) -> None:
    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        console.print(f"[green]✓[/green] Wrote {out_path}")
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
