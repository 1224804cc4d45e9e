from __future__ import annotations

from pathlib import Path
import os

APP_NAME = "BidItems"
HOME_ENV = "BID_ITEMS_HOME"


def workspace_root() -> Path:
    """Runtime data folder (run logs).

    Priority:
      1) BID_ITEMS_HOME (explicit override)
      2) When running from the repo (pyproject.toml present), use ./build/workspace
      3) Fallback: ~/BidItems
    """
    env = os.getenv(HOME_ENV)
    if env:
        return Path(env).expanduser().resolve()

    repo = project_root()
    if (repo / "pyproject.toml").exists():
        return (repo / "build" / "workspace").resolve()

    return (Path.home() / APP_NAME).resolve()


def ensure_workspace() -> Path:
    """Create the workspace folder structure if missing; return workspace root."""
    root = workspace_root()
    root.mkdir(parents=True, exist_ok=True)
    (root / "log").mkdir(exist_ok=True)
    return root


def log_dir() -> Path:
    d = workspace_root() / "log"
    d.mkdir(parents=True, exist_ok=True)
    return d


def default_output_path(pdf_path: str | Path, suffix: str = ".xlsx") -> Path:
    """Same folder and base name as the PDF, new extension: quote.pdf -> quote.xlsx"""
    p = Path(pdf_path).expanduser().resolve()
    return p.with_suffix(suffix)


def project_root() -> Path:
    """Best-effort repo root when running from source.

    Note: once installed into site-packages, this points inside the install
    location and should NOT be used for writable data paths.
    """
    p = Path(__file__).resolve()
    # .../src/bid_items/paths.py -> parents[2] == repo root
    return p.parents[2] if len(p.parents) >= 3 else p.parent
