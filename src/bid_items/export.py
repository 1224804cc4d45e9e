from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Iterable, List

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Border, Font, Side
from openpyxl.utils.exceptions import IllegalCharacterError
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from bid_items.errors import ExportError
from bid_items.models import COLUMNS, LineItem, column_headers

FIELD_NAMES: List[str] = [f.name for f in fields(LineItem)]

# 1-based spreadsheet columns
_RIGHT_COLS = (1, 5, 7)  # Qty, Price, Ext Price
_LEFT_COLS = (3,)  # Part Number
_DESC_COL = 4

_TEXT_FIELDS = ("quantity_unit", "part_number", "description", "price_unit")

_THICK = Side(style="thick")
_THIN = Side(style="thin")


def items_to_frame(items: Iterable[LineItem]) -> pd.DataFrame:
    """One row per item, columns named after the LineItem fields."""
    return pd.DataFrame([it.as_row() for it in items], columns=FIELD_NAMES)


def _xml_safe(df: pd.DataFrame) -> pd.DataFrame:
    """Drop control characters (\\x01, \\x0b ...) that xlsx cells cannot hold."""
    df = df.copy()
    for col in _TEXT_FIELDS:
        df[col] = df[col].map(lambda s: ILLEGAL_CHARACTERS_RE.sub("", s) if isinstance(s, str) else s)
    return df


# ----------------------------
# Styling
# ----------------------------

def _style_header(ws: Worksheet) -> None:
    for col in range(1, len(COLUMNS) + 1):
        cell = ws.cell(row=1, column=col)
        cell.font = Font(bold=True)
        cell.border = Border(bottom=_THICK)
        if col in _RIGHT_COLS:
            cell.alignment = Alignment(horizontal="right")
        elif col in _LEFT_COLS:
            cell.alignment = Alignment(horizontal="left")
        else:
            cell.alignment = Alignment()

    for col, (_, width) in enumerate(COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(col)].width = width

    ws.freeze_panes = "A2"


def _style_rows(ws: Worksheet, last_row: int) -> None:
    box = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)
    for row in ws.iter_rows(min_row=2, max_row=last_row, min_col=1, max_col=len(COLUMNS)):
        for cell in row:
            col = cell.column
            horizontal = None
            if col in _RIGHT_COLS:
                horizontal = "right"
            elif col in _LEFT_COLS:
                horizontal = "left"
            cell.alignment = Alignment(
                horizontal=horizontal,
                vertical="top",
                wrap_text=(col == _DESC_COL),
            )
            cell.border = box


# ----------------------------
# Writers
# ----------------------------

def write_workbook(items: List[LineItem], out_path: str | Path, sheet_name: str = "Items") -> Path:
    """
    Write items to a styled .xlsx: bold header with a thick rule, frozen
    header row, fixed column widths, thin grid around the data.
    """
    out = Path(out_path)
    df = _xml_safe(items_to_frame(items))
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=sheet_name, index=False, header=column_headers())
            ws = writer.sheets[sheet_name]
            _style_header(ws)
            _style_rows(ws, last_row=len(df) + 1)
    except OSError as e:
        raise ExportError(f"Could not write {out}: {e}") from e
    except (IllegalCharacterError, ValueError) as e:
        # ExcelWriter saves on exit even when styling failed
        out.unlink(missing_ok=True)
        raise ExportError(f"Could not write {out}: {e}") from e
    return out


def write_csv(items: List[LineItem], out_path: str | Path) -> Path:
    out = Path(out_path)
    df = items_to_frame(items)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out, index=False, header=column_headers())
    except OSError as e:
        raise ExportError(f"Could not write {out}: {e}") from e
    return out
