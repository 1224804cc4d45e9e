from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bid_items.models import LineItem
from bid_items.numbers import parse_float, parse_int, strip_non_numeric

# Qty, at least one description word, Price, Total ... and room for a part number
MIN_FIELDS = 5


# ----------------------------
# Raw field split
# ----------------------------

@dataclass(frozen=True)
class RawFields:
    """The four positional pieces of a candidate item line, still as text."""

    quantity: str
    description: str
    price: str
    total: str


def split_fields(line: str) -> Optional[RawFields]:
    """
    Cut a line into quantity / description / price / total.

    Layout (single spaces between fields):
        <qty><qty-um> <part#> <description words ...> <price>/<price-um> <total>

    The description is taken by offset, not re-joined from tokens, so any
    spacing inside it survives as-is.
    """
    fields = line.split(" ")
    if len(fields) < MIN_FIELDS:
        return None

    f_qty = fields[0]
    f_price = fields[-2]
    f_total = fields[-1]

    desc_len = len(line) - (len(f_qty) + len(f_price) + len(f_total) + 3)
    start = len(f_qty) + 1
    f_desc = line[start:start + max(0, desc_len)]

    return RawFields(quantity=f_qty, description=f_desc, price=f_price, total=f_total)


# ----------------------------
# Decompose
# ----------------------------

def decompose_line(line: str) -> Optional[LineItem]:
    """
    Turn one page line into a LineItem, or None when the line isn't an item line.

    None covers both "too few fields" and "last field is not a non-zero number";
    the scanner treats either as a description continuation.
    """
    raw = split_fields(line)
    if raw is None:
        return None

    qty = int(parse_int(strip_non_numeric(raw.quantity)).value)
    # whatever follows the digits is the unit, e.g. 5EA -> EA
    qty_um = raw.quantity[len(str(qty)):]

    part_num = raw.description.split(" ")[0]
    desc = raw.description[len(part_num) + 1:]

    price_str = strip_non_numeric(raw.price)
    price = float(parse_float(price_str).value)
    # skip the separator between price and unit, e.g. 12.50/EA -> EA
    price_um = raw.price[len(price_str) + 1:]

    total = float(parse_float(raw.total).value)
    if total == 0:
        # a long free-text line: its last word isn't a number
        return None

    return LineItem(
        quantity=qty,
        quantity_unit=qty_um,
        part_number=part_num,
        description=desc,
        unit_price=price,
        price_unit=price_um,
        total=total,
    )
