from __future__ import annotations

import re
from typing import NamedTuple, Union

# Everything but ASCII digits and the decimal point
_NON_NUMERIC = re.compile(r"[^0-9.]")

_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)
# 1234.5 / 1,234.50 / .75 ... comma group separators allowed in the whole part
_FLOAT_RE = re.compile(r"^\s*[+-]?(\d[\d,]*\.?\d*|\.\d+)\s*$", re.ASCII)


class ParsedNumber(NamedTuple):
    """A parsed value plus whether parsing actually succeeded.

    A failed parse carries a zero value, so ``ok`` is the only way to tell
    "the document said 0" apart from "the text was not a number".
    """

    value: Union[int, float]
    ok: bool


def strip_non_numeric(text: str | None) -> str:
    """'12.50/EA' -> '12.50', '5EA' -> '5'."""
    if not text:
        return ""
    return _NON_NUMERIC.sub("", text)


def parse_int(text: str | None) -> ParsedNumber:
    s = "" if text is None else str(text)
    if not _INT_RE.match(s):
        return ParsedNumber(0, False)
    try:
        return ParsedNumber(int(s.strip()), True)
    except ValueError:
        # more digits than int() will convert
        return ParsedNumber(0, False)


def parse_float(text: str | None) -> ParsedNumber:
    """Plain decimal notation only: no 'nan', 'inf', exponents or underscores."""
    s = "" if text is None else str(text)
    if not _FLOAT_RE.match(s):
        return ParsedNumber(0.0, False)
    try:
        return ParsedNumber(float(s.strip().replace(",", "")), True)
    except ValueError:
        return ParsedNumber(0.0, False)
