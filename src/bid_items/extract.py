from __future__ import annotations

from pathlib import Path
from typing import List

import pdfplumber

from bid_items.errors import ExtractionError

# pdftotext separates pages with a form feed
PAGE_BREAK = "\f"


def extract_pages(pdf_path: str | Path) -> List[str]:
    """
    Text of every page, in page order, lines separated by '\\n'.

    Pages without a text layer come back as "". Anything pdfplumber / pdfminer
    can't open or read is raised as ExtractionError.
    """
    path = Path(pdf_path)
    if not path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    try:
        with pdfplumber.open(path) as pdf:
            return [(page.extract_text() or "") for page in pdf.pages]
    except Exception as e:
        raise ExtractionError(f"Could not read {path.name}: {e}") from e


def read_text_pages(text_path: str | Path) -> List[str]:
    """Pages of an already-extracted text file (form-feed separated)."""
    path = Path(text_path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {text_path}")

    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ExtractionError(f"Could not read {path.name}: {e}") from e

    # normalise Windows line endings so fields split on single spaces only
    text = text.replace("\r\n", "\n")
    return text.split(PAGE_BREAK)
