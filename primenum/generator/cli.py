"""Command-line interface for primenum code generation."""

from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from primenum.generator import GenerationError, compile_enum, parse, resolve, targets
from primenum.generator.types import ResolvedEnum


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Primitive enum code generator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--language", "-l", required=True, help="Target language (python, rust, c)")
@click.option("--input", "-i", "input_file", required=True, help="Input enum definition file")
@click.option("--output", "-o", "output_file", required=True, help="Output file")
@click.option("--include-guard", default=None, help="Header guard macro (c only)")
@click.option("--visibility", default=None, help="Item visibility, empty for private (rust only)")
def gen(
    language: str,
    input_file: str,
    output_file: str,
    include_guard: str | None,
    visibility: str | None,
) -> None:
    """Generate enum code from a definition file."""
    with open(input_file, encoding="utf-8") as f:
        definition = f.read()

    if language not in targets():
        print(f"Unknown language: {language}")
        sys.exit(1)

    options: dict[str, str] = {}
    if language == "c" and include_guard is not None:
        options["include_guard"] = include_guard
    if language == "rust" and visibility is not None:
        options["visibility"] = visibility

    try:
        generated_file = compile_enum(definition, language, **options)
    except GenerationError as err:
        click.echo(f"error: {err}", err=True)
        sys.exit(1)

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(generated_file)


@cli.command(name="targets")
def list_targets() -> None:
    """List the supported target languages."""
    for name in targets():
        print(name)


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input enum definition file")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: str, output_json: bool) -> None:
    """Display the resolved variants of an enum definition."""
    with open(input_file, encoding="utf-8") as f:
        definition = f.read()

    try:
        enum = resolve(parse(definition))
    except GenerationError as err:
        click.echo(f"error: {err}", err=True)
        sys.exit(1)

    if output_json:
        _output_json(enum)
    else:
        _output_plain(enum)


def _output_json(enum: ResolvedEnum) -> None:
    """Output enum info as JSON."""
    data = enum.to_dict()
    data["range"] = {
        "min": enum.backing_type.min_value,
        "max": enum.backing_type.max_value,
    }
    data["default"] = enum.default.name if enum.default else None

    print(json.dumps(data, indent=2))


def _output_plain(enum: ResolvedEnum) -> None:
    """Output enum info using rich text formatting."""
    console = Console()
    backing = enum.backing_type

    console.print(f"[bold cyan]{enum.name}[/bold cyan]")
    summary = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    summary.add_column("Label", style="dim")
    summary.add_column("Value", style="white")

    summary.add_row("Backing", backing.name)
    summary.add_row("Range", f"{backing.min_value}..={backing.max_value}")
    summary.add_row("Variants", str(len(enum.variants)))
    summary.add_row("Default", enum.default.name if enum.default else "none")

    console.print(summary)
    console.print()

    console.print("[bold cyan]Variants[/bold cyan]")
    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Name", style="white")
    table.add_column("Value", style="yellow", justify="right")
    table.add_column("Hex", style="dim", justify="right")
    table.add_column("Default", style="green")
    table.add_column("Doc", style="dim")

    width = max(backing.bits // 4, 1)
    for variant in enum.variants:
        # Two's complement bits of the stored value
        raw = variant.value & ((1 << backing.bits) - 1)
        doc = variant.doc.splitlines()[0] if variant.doc else ""
        table.add_row(
            variant.name,
            str(variant.value),
            f"0x{raw:0{width}X}",
            "yes" if variant.is_default else "",
            escape(doc),
        )

    console.print(table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
