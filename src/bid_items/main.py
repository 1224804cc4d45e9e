# bid_items/main.py
# PDF -> line items -> spreadsheet, with timing and a per-run log

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import os
import subprocess
import sys
import time

from bid_items.export import write_csv, write_workbook
from bid_items.extract import extract_pages, read_text_pages
from bid_items.models import LineItem
from bid_items.paths import default_output_path
from bid_items.runlog import RunLogger, suppress_pdfminer_font_warnings
from bid_items.scanner import DEFAULT_MARKERS, TableMarkers, scan_pages

suppress_pdfminer_font_warnings()

FORMATS = {"xlsx": ".xlsx", "csv": ".csv"}


@dataclass
class ParseResult:
    source: Path
    items: List[LineItem] = field(default_factory=list)
    pages: int = 0
    elapsed_ms: int = 0


@dataclass
class ConvertResult:
    parse: ParseResult
    out_path: Path


def _quiet_logger() -> RunLogger:
    return RunLogger(log_path=None, echo=False)


def parse_pdf(
    pdf_path: str | Path,
    markers: TableMarkers = DEFAULT_MARKERS,
    logger: Optional[RunLogger] = None,
) -> ParseResult:
    """Extract every page and scan it for items; times the whole thing."""
    log = logger or _quiet_logger()
    path = Path(pdf_path)

    t0 = time.perf_counter()
    pages = extract_pages(path)
    items = scan_pages(pages, markers)
    elapsed_ms = int((time.perf_counter() - t0) * 1000)

    log.log(f"FILE: {path.name}")
    log.log(f"  PAGES: {len(pages)}")
    log.log(f"  MARKERS: start={markers.start!r} end={list(markers.end)!r}")
    log.log(f"  LINE_ITEMS: {len(items)} parsed")
    log.log(f"  {elapsed_ms} ms to parse pdf")

    return ParseResult(source=path, items=items, pages=len(pages), elapsed_ms=elapsed_ms)


def parse_text_file(
    text_path: str | Path,
    markers: TableMarkers = DEFAULT_MARKERS,
    logger: Optional[RunLogger] = None,
) -> ParseResult:
    """Same as parse_pdf for text that was already pulled out of a PDF."""
    log = logger or _quiet_logger()
    path = Path(text_path)

    t0 = time.perf_counter()
    pages = read_text_pages(path)
    items = scan_pages(pages, markers)
    elapsed_ms = int((time.perf_counter() - t0) * 1000)

    log.log(f"FILE: {path.name}")
    log.log(f"  PAGES: {len(pages)}")
    log.log(f"  LINE_ITEMS: {len(items)} parsed")

    return ParseResult(source=path, items=items, pages=len(pages), elapsed_ms=elapsed_ms)


def write_items(items: List[LineItem], out_path: Path, fmt: str = "xlsx") -> Path:
    if fmt == "csv":
        return write_csv(items, out_path)
    return write_workbook(items, out_path)


def open_file(path: Path) -> None:
    """Hand the file to the platform's default application."""
    try:
        if sys.platform.startswith("darwin"):
            subprocess.run(["open", str(path)], check=False)
        elif os.name == "nt":
            os.startfile(str(path))  # type: ignore[attr-defined]
        else:
            subprocess.run(["xdg-open", str(path)], check=False)
    except OSError:
        # no opener available (headless box); the file is still written
        pass


def convert(
    source: str | Path,
    out_path: Optional[str | Path] = None,
    markers: TableMarkers = DEFAULT_MARKERS,
    fmt: str = "xlsx",
    open_after: bool = False,
    logger: Optional[RunLogger] = None,
) -> ConvertResult:
    """
    Parse a PDF (or a pre-extracted .txt) and write the items next to it.

    Default output: same folder and base name, extension swapped for the format.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format: {fmt!r} (expected one of {sorted(FORMATS)})")

    log = logger or _quiet_logger()
    src = Path(source)

    if src.suffix.lower() == ".txt":
        result = parse_text_file(src, markers=markers, logger=log)
    else:
        result = parse_pdf(src, markers=markers, logger=log)

    out = Path(out_path).expanduser() if out_path else default_output_path(src, FORMATS[fmt])
    written = write_items(result.items, out, fmt=fmt)
    log.log(f"  SAVED: {written}")

    if open_after:
        open_file(written)

    return ConvertResult(parse=result, out_path=written)
