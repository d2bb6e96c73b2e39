"""Command-line interface for row-spreader.

This module provides a CLI for converting newline-delimited JSON into
delimited rows and for inspecting the header and schema inferred from an
input file.
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable
from typing_extensions import Annotated

from row_spreader.config import Config
from row_spreader.log import configure_logging
from row_spreader.ndjson import read_documents
from row_spreader.paths.combine import CombineMode
from row_spreader.schema_tree.nodes import format_schema
from row_spreader.tabulator import Tabulator

app = typer.Typer(
    name="row-spreader",
    help="Convert newline-delimited JSON to delimited rows, one row per array combination",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def get_config(
    flatten: Optional[bool] = None,
    intersect: Optional[bool] = None,
    separator: Optional[str] = None,
    workers: Optional[int] = None,
    verbose: bool = False,
) -> Config:
    """Get configuration from environment or CLI options.

    Args:
        flatten: Override the flatten setting from environment
        intersect: Use intersect mode instead of the configured combine mode
        separator: Override the field separator from environment
        workers: Override the worker count from environment
        verbose: Log at INFO level

    Returns:
        Config instance
    """
    overrides = {}

    # Only options given on the command line override the environment
    if flatten:
        overrides["flatten"] = True
    if intersect:
        overrides["combine_mode"] = CombineMode.INTERSECT
    if separator is not None:
        overrides["separator"] = separator
    if workers is not None:
        overrides["workers"] = workers
    if verbose:
        overrides["log_level"] = "INFO"

    return Config(**overrides)


@app.command()
def convert(
    json_file: Annotated[Path, typer.Argument(help="Newline-delimited JSON input file")],
    output: Annotated[
        Optional[Path],
        typer.Argument(help="Output file (stdout if not specified)"),
    ] = None,
    flatten: Annotated[
        bool, typer.Option("--flatten", "-f", help="Flatten array iterators out of column names")
    ] = False,
    intersect: Annotated[
        bool,
        typer.Option("--intersect", "-i", help='"Inner join" fields while constructing the schema'),
    ] = False,
    separator: Annotated[
        Optional[str], typer.Option("--separator", "-s", help="Output field separator")
    ] = None,
    workers: Annotated[
        Optional[int], typer.Option("--workers", "-w", help="Threads for per-document work")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress")] = False,
) -> None:
    """Convert a newline-delimited JSON file into delimited rows.

    The input is read twice: the first pass infers the header from every
    document, the second writes one row per combination of array elements.

    Example:
        row-spreader convert events.jsonl events.csv

        row-spreader convert events.jsonl --flatten --intersect
    """
    try:
        config = get_config(flatten, intersect, separator, workers, verbose)
        configure_logging(config.log_level)

        tabulator = Tabulator.from_config(config)

        if output:
            err_console.print(f"[blue]Converting {json_file}...[/blue]")
            count = tabulator.convert_file(json_file, output, config.separator)
            err_console.print(f"[green]✓[/green] {count} rows written to {output}")
        else:
            tabulator.convert(json_file, sys.stdout, config.separator)

    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command(name="show-header")
def show_header(
    json_file: Annotated[Path, typer.Argument(help="Newline-delimited JSON input file")],
    flatten: Annotated[
        bool, typer.Option("--flatten", "-f", help="Flatten array iterators out of column names")
    ] = False,
    intersect: Annotated[
        bool,
        typer.Option("--intersect", "-i", help='"Inner join" fields while constructing the schema'),
    ] = False,
) -> None:
    """Display the columns inferred from an input file.

    Example:
        row-spreader show-header events.jsonl --intersect
    """
    try:
        config = get_config(flatten, intersect)
        configure_logging(config.log_level)

        tabulator = Tabulator.from_config(config)
        tabulator.compile(tabulator.build_header(read_documents(json_file)))

        rich_table = RichTable(title=f"Header: {json_file}")
        rich_table.add_column("#", style="yellow", justify="right")
        rich_table.add_column("Column", style="cyan")
        for position, column in enumerate(tabulator.columns, start=1):
            rich_table.add_row(str(position), escape(column))

        console.print(rich_table)

    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command(name="show-schema")
def show_schema(
    json_file: Annotated[Path, typer.Argument(help="Newline-delimited JSON input file")],
    intersect: Annotated[
        bool,
        typer.Option("--intersect", "-i", help='"Inner join" fields while constructing the schema'),
    ] = False,
    format: Annotated[
        str, typer.Option("--format", help="Output format: table or text")
    ] = "table",
) -> None:
    """Display the schema tree compiled from an input file.

    Each line is one path step; nested steps are indented under their parent
    and array steps are shown as ``$``.

    Example:
        row-spreader show-schema events.jsonl

        row-spreader show-schema events.jsonl --format text
    """
    try:
        config = get_config(intersect=intersect)
        configure_logging(config.log_level)

        tabulator = Tabulator.from_config(config)
        tabulator.compile(tabulator.build_header(read_documents(json_file)))
        rows = format_schema(tabulator.schema)

        if format == "table":
            rich_table = RichTable(title=f"Schema: {json_file}")
            rich_table.add_column("Path", style="cyan")
            rich_table.add_column("Kind", style="magenta")
            for name, kind in rows:
                rich_table.add_row(escape(name), kind)
            console.print(rich_table)
        else:  # text format
            lines = [f"Schema: {json_file}", "=" * 80, ""]
            for name, kind in rows:
                lines.append(f"{name:40} {kind}")
            console.print("\n".join(lines), markup=False, highlight=False)

    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
