from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from bid_items.config import load_env_files, load_settings
from bid_items.errors import BidItemsError
from bid_items.main import ParseResult, convert as convert_source, parse_pdf, parse_text_file
from bid_items.models import LineItem
from bid_items.paths import ensure_workspace
from bid_items.runlog import create_run_log

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Pull line items out of bid / quote PDFs.")
console = Console()


# ----------------------------
# Helpers
# ----------------------------
def fmt_money(v) -> str:
    try:
        return f"{float(v):,.2f}"
    except (TypeError, ValueError):
        return ""


def shorten(s: str, n: int = 54) -> str:
    s = "" if s is None else str(s)
    return s if len(s) <= n else s[: n - 1] + "…"


def items_table(items: List[LineItem], title: str = "Items") -> Table:
    t = Table(title=title)
    t.add_column("Qty", justify="right")
    t.add_column("UM", style="dim")
    t.add_column("Part Number")
    t.add_column("Description")
    t.add_column("Price", justify="right")
    t.add_column("UM", style="dim")
    t.add_column("Ext Price", justify="right")
    for it in items:
        t.add_row(
            str(it.quantity),
            it.quantity_unit,
            it.part_number,
            shorten(it.description.replace("\n", " / ")),
            fmt_money(it.unit_price),
            it.price_unit,
            fmt_money(it.total),
        )
    return t


def _fail(msg: str) -> None:
    console.print(f"[red]Error:[/red] {msg}")
    raise typer.Exit(code=1)


def _start_opt():
    return typer.Option(
        None,
        "--start-marker",
        "-s",
        help="Text on the table header line (default: 'ORDER QTY' or BID_ITEMS_START_MARKER).",
    )


def _end_opt():
    return typer.Option(
        None,
        "--end-marker",
        "-e",
        help="Text that ends the table; repeat for several (default: BID_ITEMS_END_MARKERS).",
    )


# ----------------------------
# Commands
# ----------------------------
@app.command()
def convert(
    source: Path = typer.Argument(..., help="PDF (or pre-extracted .txt) to read."),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Output path. Default: next to the source with .xlsx / .csv extension.",
    ),
    csv: bool = typer.Option(False, "--csv", help="Write CSV instead of a styled workbook."),
    open_after: Optional[bool] = typer.Option(
        None,
        "--open/--no-open",
        help="Open the result when done (default: BID_ITEMS_OPEN).",
    ),
    start_marker: Optional[str] = _start_opt(),
    end_marker: Optional[List[str]] = _end_opt(),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the output path."),
):
    """Parse SOURCE and save its line items as a spreadsheet."""
    load_env_files()
    settings = load_settings(start_marker, end_marker, open_after)
    ensure_workspace()

    logger = create_run_log(echo=False)
    try:
        result = convert_source(
            source,
            out_path=out,
            markers=settings.markers,
            fmt="csv" if csv else "xlsx",
            open_after=settings.open_after,
            logger=logger,
        )
    except FileNotFoundError as e:
        logger.log(f"ERROR: {e}")
        _fail(str(e))
    except BidItemsError as e:
        logger.exception(f"Failed converting {source}")
        _fail(str(e))
    finally:
        logger.close()

    if quiet:
        typer.echo(str(result.out_path))
        return

    parsed = result.parse
    if not parsed.items:
        console.print(f"[yellow]No line items found[/yellow] in {parsed.source.name} "
                      f"(start marker {settings.markers.start!r}).")
    console.print(f"[dim]{parsed.elapsed_ms} ms to parse {parsed.pages} page(s)[/dim]")
    console.print(f"[green]Saved[/green] {len(parsed.items)} item(s) → [cyan]{result.out_path}[/cyan]")


@app.command()
def show(
    source: Path = typer.Argument(..., help="PDF (or pre-extracted .txt) to read."),
    start_marker: Optional[str] = _start_opt(),
    end_marker: Optional[List[str]] = _end_opt(),
):
    """Preview the line items found in SOURCE without writing anything."""
    load_env_files()
    settings = load_settings(start_marker, end_marker)

    try:
        if source.suffix.lower() == ".txt":
            result: ParseResult = parse_text_file(source, markers=settings.markers)
        else:
            result = parse_pdf(source, markers=settings.markers)
    except (FileNotFoundError, BidItemsError) as e:
        _fail(str(e))

    console.print(items_table(result.items, title=result.source.name))
    console.print(f"[dim]{len(result.items)} item(s), {result.elapsed_ms} ms to parse {result.pages} page(s)[/dim]")


@app.command()
def markers(
    start_marker: Optional[str] = _start_opt(),
    end_marker: Optional[List[str]] = _end_opt(),
):
    """Print the table markers that convert / show would use."""
    load_env_files()
    settings = load_settings(start_marker, end_marker)
    t = Table(show_header=False, box=None)
    t.add_row("start", repr(settings.markers.start))
    for m in settings.markers.end:
        t.add_row("end", repr(m))
    console.print(t)


if __name__ == "__main__":
    app()
