# Per-run log file written to <workspace>/log/

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional
import logging
import traceback

from bid_items.paths import log_dir, workspace_root


# ----------------------------
# Quiet noisy PDF font warnings (pdfminer)
# ----------------------------

def suppress_pdfminer_font_warnings() -> None:
    """Silence pdfminer warnings like 'Could not get FontBBox...'."""
    for name in ("pdfminer", "pdfminer.pdffont", "pdfminer.psparser", "pdfminer.pdfinterp"):
        logger = logging.getLogger(name)
        logger.setLevel(logging.ERROR)
        logger.propagate = False


class RunLogger:
    def __init__(self, log_path: Optional[Path] = None, echo: bool = True):
        self.log_path = log_path
        self._fh = log_path.open("w", encoding="utf-8") if log_path else None
        self.echo = echo

    def close(self):
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def log(self, msg: str = ""):
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {msg}"
        if self._fh is not None:
            self._fh.write(line + "\n")
            self._fh.flush()
        if self.echo:
            print(msg)

    def exception(self, context: str):
        self.log(f"ERROR: {context}")
        self.log(traceback.format_exc())


def create_run_log(echo: bool = True) -> RunLogger:
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = log_dir() / f"run_{stamp}.txt"
    logger = RunLogger(log_path=log_path, echo=echo)
    logger.log(f"Log file: {log_path}")
    logger.log(f"Workspace root: {workspace_root()}")
    logger.log(f"CWD: {Path.cwd().resolve()}")
    return logger
