from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from retromark.markers.catalog import describe_markers
from retromark.markers.http import HTTP_METHODS


app = typer.Typer(no_args_is_help=True, add_completion=False)

console = Console()

_TARGETS = ("method", "parameter", "field")


def _check_format(format: str) -> str:
    fmt = format.lower().strip()
    if fmt not in ("table", "json"):
        raise typer.BadParameter("format must be one of: table, json")
    return fmt


def _print_json(payload: object) -> None:
    console.print(
        json.dumps(payload, indent=2),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


@app.command()
def verbs(
    format: str = typer.Option("table", help="Output format: table|json"),
) -> None:
    """List the HTTP method markers and the verb each one declares."""
    fmt = _check_format(format)
    rows = [{"verb": verb, "marker": cls.__name__} for verb, cls in HTTP_METHODS.items()]

    if fmt == "json":
        _print_json(rows)
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("VERB", no_wrap=True)
    table.add_column("MARKER", no_wrap=True)
    for r in rows:
        table.add_row(r["verb"], r["marker"])

    console.print(table)


@app.command()
def markers(
    target: Optional[str] = typer.Option(None, help="Filter by target: method|parameter|field"),
    format: str = typer.Option("table", help="Output format: table|json"),
) -> None:
    """List every marker with the fields it carries."""
    fmt = _check_format(format)
    if target is not None:
        target = target.lower().strip()
        if target not in _TARGETS:
            raise typer.BadParameter("target must be one of: " + ", ".join(_TARGETS))

    rows = describe_markers(target)  # type: ignore[arg-type]

    if fmt == "json":
        _print_json(rows)
        return

    console.print(f"[bold]Markers:[/bold] {len(rows)}")

    table = Table(show_header=True, header_style="bold")
    table.add_column("MARKER", no_wrap=True)
    table.add_column("TARGET", no_wrap=True)
    table.add_column("FIELDS")

    for r in rows:
        parts = []
        for f in r["fields"]:
            text = f"{f['name']}: {f['type']}"
            if not f["required"]:
                text += f" = {f['default']!r}"
            parts.append(text)
        table.add_row(r["name"], r["target"], escape(", ".join(parts) or "-"))

    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
