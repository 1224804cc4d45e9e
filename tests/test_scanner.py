from bid_items.models import LineItem
from bid_items.scanner import DEFAULT_MARKERS, TableMarkers, scan_page, scan_pages

from conftest import ITEM_LINE

HEADER = "ORDER QTY PART NUMBER DESCRIPTION PRICE EXTENSION"


def page(*lines: str) -> str:
    return "\n".join(lines)


def test_single_item_then_continued_notice():
    items = scan_page(page(HEADER, ITEM_LINE, "** Continued on next page", "9EA 999 Not Read 1.00/EA 9.00"))
    assert items == [
        LineItem(
            quantity=5,
            quantity_unit="EA",
            part_number="10023",
            description="Widget Assembly",
            unit_price=12.50,
            price_unit="EA",
            total=62.50,
        )
    ]


def test_text_before_any_item_is_dropped():
    assert scan_page(page(HEADER, "additional notes about the part")) == []
    assert scan_page(page(HEADER, "notes")) == []


def test_long_free_text_line_is_folded_into_previous_item():
    items = scan_page(page(HEADER, ITEM_LINE, "see attached drawing rev B N/A"))
    assert len(items) == 1
    assert items[0].description == "Widget Assembly\nsee attached drawing rev B N/A"


def test_short_line_is_folded_into_previous_item():
    items = scan_page(page(HEADER, ITEM_LINE, "zinc plated", "per MIL-SPEC"))
    assert len(items) == 1
    assert items[0].description == "Widget Assembly\nzinc plated\nper MIL-SPEC"


def test_no_start_marker_means_no_items():
    text = page("ACME SUPPLY CO", ITEM_LINE, ITEM_LINE, "** Continued")
    assert scan_page(text) == []


def test_two_pages_in_order():
    page1 = page(HEADER, ITEM_LINE)
    page2 = page(HEADER, "1BX 20001 Spring kit 4.00/BX 4.00")
    items = scan_pages([page1, page2])
    assert [it.part_number for it in items] == ["10023", "20001"]


def test_each_page_needs_its_own_header():
    page1 = page(HEADER, ITEM_LINE)
    page2 = page("1BX 20001 Spring kit 4.00/BX 4.00")
    assert len(scan_pages([page1, page2])) == 1


def test_continuation_does_not_cross_pages():
    page1 = page(HEADER, ITEM_LINE)
    page2 = page(HEADER, "carried over text", "1BX 20001 Spring kit 4.00/BX 4.00")
    items = scan_pages([page1, page2])
    assert items[0].description == "Widget Assembly"
    assert items[1].description == "Spring kit"


def test_empty_text_yields_nothing():
    assert scan_page("") == []
    assert scan_page("") == []
    assert scan_pages([]) == []
    assert scan_pages(["", ""]) == []


def test_page_ending_inside_table_keeps_items():
    text = page(HEADER, ITEM_LINE, "1BX 20001 Spring kit 4.00/BX 4.00")
    assert len(scan_page(text)) == 2


def test_full_page(quote_page):
    items = scan_page(quote_page)
    assert [it.part_number for it in items] == ["10023", "ABC-1"]
    assert items[0].description == "Widget Assembly\nsee attached drawing rev B N/A"
    assert items[1].description == "Hex  bolt, 1/4\nzinc plated"
    assert items[1].total == 2.20


def test_end_marker_before_table_is_ignored():
    text = page("The pricing on this bid is in USD", HEADER, ITEM_LINE)
    assert len(scan_page(text)) == 1


def test_custom_markers():
    markers = TableMarkers(start="QTY  DESCRIPTION", end=("SUBTOTAL",))
    text = page("QTY  DESCRIPTION", ITEM_LINE, "SUBTOTAL 62.50", ITEM_LINE)
    assert len(scan_page(text, markers)) == 1
    # default markers don't see this table at all
    assert scan_page(text, DEFAULT_MARKERS) == []


def test_markers():
    assert DEFAULT_MARKERS.is_start("ORDER QTY")
    assert DEFAULT_MARKERS.is_end("** Continued")
    assert DEFAULT_MARKERS.is_end("The pricing on this bid expires")
    assert not DEFAULT_MARKERS.is_end(ITEM_LINE)
    assert not TableMarkers(end=("",)).is_end(ITEM_LINE)


def test_windows_line_endings_still_parse():
    text = HEADER + "\r\n" + ITEM_LINE + "\r\n"
    items = scan_page(text)
    assert len(items) == 1
    assert items[0].total == 62.50
