from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

# Separator used when a continuation line is folded into a description
CONTINUATION_SEPARATOR = "\n"

# (header, width) in spreadsheet column order
COLUMNS: List[Tuple[str, int]] = [
    ("Qty", 10),
    ("UM", 5),
    ("Part Number", 15),
    ("Description", 65),
    ("Price", 10),
    ("UM", 5),
    ("Ext Price", 10),
]


@dataclass
class LineItem:
    """One purchased line recovered from a bid / quote page.

    Every field always populates: numbers fall back to zero and units to ""
    when the source text can't be read, so building one never fails.
    Only ``description`` changes after creation (continuation lines).
    """

    quantity: int = 0
    quantity_unit: str = ""
    part_number: str = ""
    description: str = ""
    unit_price: float = 0.0
    price_unit: str = ""
    total: float = 0.0

    def append_description(self, line: str) -> None:
        self.description += f"{CONTINUATION_SEPARATOR}{line}"

    def as_row(self) -> List[Any]:
        return [
            self.quantity,
            self.quantity_unit,
            self.part_number,
            self.description,
            self.unit_price,
            self.price_unit,
            self.total,
        ]


def column_headers() -> List[str]:
    return [name for name, _ in COLUMNS]
