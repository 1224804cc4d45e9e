from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from bid_items.decompose import decompose_line
from bid_items.models import LineItem

DEFAULT_START_MARKER = "ORDER QTY"
DEFAULT_END_MARKERS: Tuple[str, ...] = ("** Continued", "The pricing on this bid")


@dataclass(frozen=True)
class TableMarkers:
    """Substrings bounding the item table on a page.

    ``start`` is the table header line; any of ``end`` closes the table
    (end of list, or a "continued on next page" notice).
    """

    start: str = DEFAULT_START_MARKER
    end: Tuple[str, ...] = DEFAULT_END_MARKERS

    def is_start(self, line: str) -> bool:
        return self.start in line

    def is_end(self, line: str) -> bool:
        return any(m and m in line for m in self.end)


DEFAULT_MARKERS = TableMarkers()


def scan_page(page_text: str, markers: TableMarkers = DEFAULT_MARKERS) -> List[LineItem]:
    """
    Collect the line items of one page.

    Lines before the start marker are ignored (the marker line too). Inside the
    table every line either becomes a new item or, when it doesn't decompose,
    is appended to the previous item's description. The first end-marker line
    stops the page.
    """
    items: List[LineItem] = []
    if not page_text:
        return items

    in_table = False
    last_item: Optional[LineItem] = None

    for line in page_text.split("\n"):
        if not in_table:
            if markers.is_start(line):
                in_table = True
            continue

        if markers.is_end(line):
            return items

        item = decompose_line(line)
        if item is None:
            # continuation line; nothing to attach to before the first item
            if last_item is not None:
                last_item.append_description(line)
            continue

        items.append(item)
        last_item = item

    return items


def scan_pages(pages: Iterable[str], markers: TableMarkers = DEFAULT_MARKERS) -> List[LineItem]:
    """Scan pages in order; each page needs its own start marker."""
    items: List[LineItem] = []
    for page_text in pages:
        items.extend(scan_page(page_text, markers))
    return items
