from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence
import os

from dotenv import load_dotenv

from bid_items.paths import workspace_root
from bid_items.scanner import DEFAULT_END_MARKERS, DEFAULT_START_MARKER, TableMarkers

START_MARKER_ENV = "BID_ITEMS_START_MARKER"
END_MARKERS_ENV = "BID_ITEMS_END_MARKERS"
OPEN_ENV = "BID_ITEMS_OPEN"

_TRUTHY = {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    markers: TableMarkers
    open_after: bool = False


def load_env_files(cwd: Optional[Path] = None) -> None:
    """Pull .env from the working directory, then the workspace.

    Values already in the environment are never overwritten.
    """
    for folder in (cwd or Path.cwd(), workspace_root()):
        env_file = Path(folder) / ".env"
        if env_file.is_file():
            load_dotenv(env_file, override=False)


def split_markers(value: str | None) -> tuple[str, ...]:
    """'** Continued|Subtotal' -> ('** Continued', 'Subtotal'); blanks dropped."""
    if not value:
        return ()
    return tuple(p for p in (s.strip() for s in value.split("|")) if p)


def load_settings(
    start_marker: Optional[str] = None,
    end_markers: Optional[Sequence[str]] = None,
    open_after: Optional[bool] = None,
) -> Settings:
    """Explicit arguments win over environment variables, which win over defaults."""
    start = start_marker or os.environ.get(START_MARKER_ENV, "").strip() or DEFAULT_START_MARKER

    ends: tuple[str, ...] = tuple(m for m in (end_markers or ()) if m)
    if not ends:
        ends = split_markers(os.environ.get(END_MARKERS_ENV)) or DEFAULT_END_MARKERS

    if open_after is None:
        open_after = os.environ.get(OPEN_ENV, "").strip().lower() in _TRUTHY

    return Settings(markers=TableMarkers(start=start, end=ends), open_after=open_after)
