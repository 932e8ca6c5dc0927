"""Command-line interface for entitygen code generation."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from entitygen.generator import driver
from entitygen.generator.entities import DEFAULT_RUNTIME_IMPORT
from entitygen.generator.gen_logging import configure_logging
from entitygen.generator.validation import GenerationError

logger = logging.getLogger(__name__)

kind_option = click.option(
    "--kind",
    "-k",
    "kinds",
    multiple=True,
    type=click.Choice(list(driver.ENTITY_KINDS)),
    help="Entity kind to include, repeatable (default: all)",
)


@click.group()
def cli() -> None:
    """entitygen entity code generator."""


@cli.command()
@click.option("--output", "-o", "output_file", required=True, help="Output Python module")
@kind_option
@click.option(
    "--runtime-import",
    "runtime_import",
    default=DEFAULT_RUNTIME_IMPORT,
    show_default=True,
    help="Module the generated code imports its runtime support from",
)
@click.option("--verbose", "-v", is_flag=True, help="Log how every property is resolved")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors")
def gen(
    output_file: str, kinds: tuple[str, ...], runtime_import: str, verbose: bool, quiet: bool
) -> None:
    """Generate the entity module."""
    configure_logging(verbose=verbose, quiet=quiet)
    try:
        driver.write(output_file, kinds, runtime_import)
    except GenerationError as e:
        logger.error("%s", e)
        sys.exit(1)


@cli.command()
@kind_option
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option(
    "--descriptors",
    is_flag=True,
    default=False,
    help="Include the full descriptors in the JSON output",
)
def info(kinds: tuple[str, ...], output_json: bool, descriptors: bool) -> None:
    """Display the entities and how their properties are fetched."""
    collected = driver.collect(kinds)

    if output_json:
        _output_json(collected, descriptors)
    else:
        _output_plain(collected)


def _output_json(collected: list, descriptors: bool) -> None:
    """Output entity info as JSON."""
    data: dict[str, Any] = {}
    for kind, entities in collected:
        summary = driver.summarize(entities)
        if descriptors:
            for item, entity in zip(summary, entities, strict=True):
                item["descriptor"] = entity.to_dict()
        data[kind] = summary

    print(json.dumps(data, indent=2))


def _output_plain(collected: list) -> None:
    """Output entity info using rich text formatting."""
    console = Console()

    for kind, entities in collected:
        console.print(f"[bold cyan]{kind.capitalize()}[/bold cyan]")

        table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
        table.add_column("Entity", style="white")
        table.add_column("API", style="green")
        table.add_column("Fields", style="yellow", justify="right")
        table.add_column("Fallible", style="yellow", justify="right")
        table.add_column("Strategies", style="dim")

        for item in driver.summarize(entities):
            strategies = ", ".join(f"{name} {count}" for name, count in item["strategies"].items())
            table.add_row(
                item["name"],
                item["api_name"] or "",
                str(item["properties"]),
                str(item["fallible"]),
                strategies,
            )

        console.print(table)
        console.print()


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
