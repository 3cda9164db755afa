"""
styled-breakpoints CLI.

Prints media queries for the default breakpoints or for a breakpoint map
loaded from a TOML / YAML file:

    styled-breakpoints up tablet
    styled-breakpoints between tablet desktop --config breakpoints.toml
    styled-breakpoints list
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from ._version import get_version
from .config import load_breakpoints
from .errors import BreakpointError
from .queries import BreakpointQuery, between, down, only, up
from .specs import DEFAULT_BREAKPOINT_MAP, BreakpointMap

console = Console()

app = typer.Typer(
    help="Build CSS media queries from named breakpoints",
    no_args_is_help=True,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Breakpoint config (.toml, .yaml, .yml); default breakpoints if omitted",
    ),
]


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"styled-breakpoints {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version",
        ),
    ] = None,
) -> None:
    """styled-breakpoints CLI main callback for global options."""
    pass


def _load(config: Path | None) -> BreakpointMap:
    if config is None:
        return DEFAULT_BREAKPOINT_MAP
    try:
        return load_breakpoints(config)
    except BreakpointError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


def _emit(query: BreakpointQuery, config: Path | None) -> None:
    breakpoints = _load(config)
    try:
        typer.echo(query.resolve(breakpoints))
    except BreakpointError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command(name="up")
def up_command(
    name: Annotated[str, typer.Argument(help="Breakpoint name")],
    config: ConfigOption = None,
) -> None:
    """Media query for viewports at least as wide as NAME."""
    _emit(up(name), config)


@app.command(name="down")
def down_command(
    name: Annotated[str, typer.Argument(help="Breakpoint name")],
    config: ConfigOption = None,
) -> None:
    """Media query for viewports narrower than NAME."""
    _emit(down(name), config)


@app.command(name="between")
def between_command(
    start: Annotated[str, typer.Argument(help="First breakpoint of the range")],
    end: Annotated[str, typer.Argument(help="Last breakpoint of the range")],
    config: ConfigOption = None,
) -> None:
    """Media query from START through the end of END's range."""
    _emit(between(start, end), config)


@app.command(name="only")
def only_command(
    name: Annotated[str, typer.Argument(help="Breakpoint name")],
    config: ConfigOption = None,
) -> None:
    """Media query for NAME's range only."""
    _emit(only(name), config)


@app.command(name="list")
def list_command(
    config: ConfigOption = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List breakpoints with their media queries."""
    breakpoints = _load(config)
    rows = []
    for name, width in breakpoints.items():
        only_query = None
        if breakpoints.successor(name) is not None:
            only_query = only(name).resolve(breakpoints)
        rows.append(
            {
                "name": name,
                "width": width,
                "up": up(name).resolve(breakpoints),
                "only": only_query,
            }
        )

    if output_json:
        console.print_json(json.dumps(rows))
        return

    table = Table(title="Breakpoints")
    table.add_column("Name")
    table.add_column("Width", justify="right")
    table.add_column("Up")
    table.add_column("Only")
    for row in rows:
        table.add_row(row["name"], row["width"], row["up"], row["only"] or "[dim]-[/dim]")

    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
