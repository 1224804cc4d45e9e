from __future__ import annotations

import pytest

from bid_items.config import END_MARKERS_ENV, OPEN_ENV, START_MARKER_ENV
from bid_items.paths import HOME_ENV

ITEM_LINE = "5EA 10023 Widget Assembly 12.50/EA 62.50"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep run logs in tmp and ignore any marker settings from the real environment."""
    monkeypatch.setenv(HOME_ENV, str(tmp_path / "workspace"))
    for name in (START_MARKER_ENV, END_MARKERS_ENV, OPEN_ENV):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def quote_page() -> str:
    return "\n".join([
        "ACME SUPPLY CO",
        "BID # 44817",
        "ORDER QTY PART NUMBER DESCRIPTION PRICE EXTENSION",
        ITEM_LINE,
        "see attached drawing rev B N/A",
        "2BX ABC-1 Hex  bolt, 1/4 1.10/BX 2.20",
        "zinc plated",
        "The pricing on this bid is valid for 30 days",
        "9EA 999 Never Read 1.00/EA 9.00",
    ])
