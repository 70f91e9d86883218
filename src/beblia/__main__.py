"""CLI entry point for Beblia."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from beblia import __version__
from beblia.config import Settings, load_settings
from beblia.errors import BebliaError
from beblia.loader import load, save
from beblia.localization import (
    Localization,
    get_default_localization,
    set_default_localization,
)
from beblia.model import TestamentKind
from beblia.query import parse_reference

console = Console()


def _load_or_exit(path: str):
    try:
        return load(path)
    except BebliaError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (YAML)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None):
    """Beblia - convert and query Bible XML and .beblia files."""
    try:
        settings = load_settings(config_path)
    except BebliaError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    logging.basicConfig(level=settings.log_level)

    if settings.localization_path:
        try:
            set_default_localization(Localization.from_file(settings.localization_path))
        except BebliaError as e:
            console.print(f"[red]Error: {e}[/red]")
            sys.exit(1)

    ctx.obj = settings


@cli.command()
@click.argument("inputs", nargs=-1, required=True, type=click.Path())
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Output file (only with a single input)",
)
@click.pass_obj
def convert(settings: Settings, inputs: tuple[str, ...], output: str | None):
    """Convert Bible files to the binary .beblia format.

    Example: beblia convert EnglishKJV.xml
    """
    if output and len(inputs) > 1:
        console.print("[red]Error: --output requires a single input file[/red]")
        sys.exit(2)

    succeeded = 0
    failed = 0
    for input_file in inputs:
        target = (
            Path(output)
            if output
            else Path(input_file).with_suffix(settings.binary_extension)
        )
        try:
            bible = load(input_file)
            save(bible, target)
        except (BebliaError, OSError) as e:
            console.print(f"[red]✗ {input_file}: {e}[/red]")
            failed += 1
            continue

        console.print(f"[green]✓ {input_file} -> {target}[/green]")
        succeeded += 1

    console.print(
        f"\nConversion complete: {succeeded} succeeded, {failed} failed."
    )
    if failed:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path())
@click.argument("reference")
@click.option("--output", "-o", type=click.Path(), help="Output JSON to file")
def get(file: str, reference: str, output: str | None):
    """Look up verses by quick reference.

    Example: beblia get KJV.beblia "JN 3:16-18"
    """
    bible = _load_or_exit(file)
    verses = bible.query(reference)

    if not verses:
        console.print(f"[yellow]No verses found for {reference}[/yellow]")
        sys.exit(1)

    parsed = parse_reference(reference, bible.localization)
    book_name = bible.book_name(parsed.book_number) if parsed else None

    if output:
        result = {
            "reference": reference,
            "translation": bible.translation,
            "book": book_name,
            "chapter": parsed.chapter if parsed else None,
            "verses": [v.to_dict() for v in verses],
        }
        Path(output).write_text(
            json.dumps(result, indent=2, ensure_ascii=False), encoding="utf-8"
        )
        console.print(f"[green]✓ Output written to {output}[/green]")
        return

    title = f"{book_name or reference} {parsed.chapter}" if parsed else reference
    body = "\n".join(f"[bold]{v.number}[/bold] {v.text}" for v in verses)
    console.print(Panel(body, title=title, subtitle=bible.translation or None))


@cli.command()
@click.argument("file", type=click.Path())
@click.option(
    "--testament",
    "-t",
    type=click.Choice(["old", "new"], case_sensitive=False),
    default=None,
    help="Only list books of one testament",
)
def books(file: str, testament: str | None):
    """List the books in a Bible file."""
    bible = _load_or_exit(file)
    kind = TestamentKind.from_name(testament) if testament else None

    table = Table(title=bible.translation or file)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Abbreviation")
    table.add_column("Chapters", justify="right")

    for book in bible.books(kind):
        table.add_row(
            str(book.number),
            bible.book_name(book) or "?",
            bible.book_abbreviation(book) or "",
            str(len(book.chapters)),
        )

    console.print(table)


@cli.command()
@click.argument("file", type=click.Path(), required=False)
@click.option("--output", "-o", type=click.Path(), help="Write table to file")
def localization(file: str | None, output: str | None):
    """Print the book name table (a Bible's embedded one, or the default)."""
    table = _load_or_exit(file).localization if file else get_default_localization()
    text = table.serialize()

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]✓ {len(table)} books written to {output}[/green]")
    else:
        click.echo(text, nl=False)


if __name__ == "__main__":
    cli()
