from __future__ import annotations


class BidItemsError(RuntimeError):
    """Base class for failures reported to the user (bad PDF, unwritable output)."""


class ExtractionError(BidItemsError):
    """The PDF could not be opened or its text could not be read."""


class ExportError(BidItemsError):
    """The spreadsheet / CSV could not be written."""
