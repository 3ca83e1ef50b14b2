"""Command-line interface for xsd-jsonschema."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from xsd_jsonschema.converter import convert_xsd, derive_array_paths, derive_list_paths
from xsd_jsonschema.errors import XsdConversionError
from xsd_jsonschema.materializer import XmlParseOptions, parse_xml
from xsd_jsonschema.options import ConvertOptions, SchemaDialect
from xsd_jsonschema.parser import parse_xsd

console = Console()
error_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
    )


def _fail(exc: Exception) -> None:
    error_console.print(f"[red]Error:[/red] {exc}")
    sys.exit(1)


unbounded_option = click.option(
    "--unbounded-as-array",
    "-u",
    is_flag=True,
    help="Treat every unbounded sequence element as an array.",
)
array_element_option = click.option(
    "--array-element",
    "-a",
    "array_elements",
    multiple=True,
    help="Element name treated as an array when unbounded (repeatable).",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log skipped constructs to stderr.",
)


@click.group()
@click.version_option(package_name="xsd-jsonschema")
def main() -> None:
    """Convert XML Schema (XSD) documents to JSON Schema."""


@main.command()
@click.argument("schema", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--dialect",
    "-d",
    type=click.Choice([d.value for d in SchemaDialect], case_sensitive=False),
    default=SchemaDialect.DRAFT_2020_12.value,
    show_default=True,
    help="JSON Schema dialect to emit.",
)
@unbounded_option
@array_element_option
@click.option(
    "--origin-types",
    is_flag=True,
    help="Annotate emitted nodes with their XSD type (xsdOriginType).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the schema to FILE instead of stdout.",
)
@verbose_option
def convert(
    schema: Path,
    dialect: str,
    unbounded_as_array: bool,
    array_elements: tuple[str, ...],
    origin_types: bool,
    output: Path | None,
    verbose: bool,
) -> None:
    """Convert SCHEMA to a JSON Schema document."""
    _configure_logging(verbose)
    options = ConvertOptions(
        array_element_names=array_elements,
        treat_unbounded_as_array=unbounded_as_array,
        show_origin_types=origin_types,
        schema_dialect=SchemaDialect(dialect.lower()),
    )

    try:
        result = convert_xsd(parse_xsd(schema), options)
    except XsdConversionError as exc:
        _fail(exc)
        return

    text = json.dumps(result, indent=2)
    if output is None:
        console.print_json(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"[green]✓[/green] Wrote {output}")


@main.command()
@click.argument("schema", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@unbounded_option
@array_element_option
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format.",
)
@verbose_option
def paths(
    schema: Path,
    unbounded_as_array: bool,
    array_elements: tuple[str, ...],
    output: str,
    verbose: bool,
) -> None:
    """Show the array and list element paths derived from SCHEMA."""
    _configure_logging(verbose)
    options = ConvertOptions(
        array_element_names=array_elements,
        treat_unbounded_as_array=unbounded_as_array,
    )

    try:
        document = parse_xsd(schema)
    except XsdConversionError as exc:
        _fail(exc)
        return

    array_paths = sorted(derive_array_paths(document, options))
    list_paths = sorted(derive_list_paths(document))

    if output == "json":
        console.print_json(json.dumps({"array_paths": array_paths, "list_paths": list_paths}))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Kind", style="dim", width=8)
    table.add_column("Path")
    for path in array_paths:
        table.add_row("array", path)
    for path in list_paths:
        table.add_row("list", path)
    console.print(table)


@main.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--xsd",
    "xsd_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="XSD used to derive array and list paths.",
)
@unbounded_option
@array_element_option
@verbose_option
def xml(
    document: Path,
    xsd_path: Path,
    unbounded_as_array: bool,
    array_elements: tuple[str, ...],
    verbose: bool,
) -> None:
    """Parse DOCUMENT to JSON shaped by the schema's array and list paths."""
    _configure_logging(verbose)
    try:
        options = XmlParseOptions(
            xsd=parse_xsd(xsd_path),
            array_element_names=array_elements,
            treat_unbounded_as_array=unbounded_as_array,
        )
        data = parse_xml(document, options)
    except XsdConversionError as exc:
        _fail(exc)
        return

    console.print_json(json.dumps(data))


if __name__ == "__main__":
    main()
