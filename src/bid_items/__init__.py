"""Line-item extraction from bid / quote PDFs."""

from bid_items.decompose import decompose_line
from bid_items.models import LineItem
from bid_items.scanner import TableMarkers, scan_page, scan_pages

__all__ = ["LineItem", "TableMarkers", "decompose_line", "scan_page", "scan_pages"]
__version__ = "0.1.0"
