"""Numeric coercion and unit disambiguation for raw export values."""

from __future__ import annotations

import math
import re
from typing import Any


# Largest sleep value still read as hours; anything above is seconds.
SLEEP_HOURS_MAX = 50.0
SECONDS_PER_HOUR = 3600.0

# Leading decimal number, e.g. "7.5", " 27000 ", "6.25h", "1e4"
_DECIMAL_PREFIX = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
# Whole-string decimal; rejects Python-only spellings like "1_000" or "nan"
_DECIMAL = re.compile(_DECIMAL_PREFIX.pattern + r"\s*$")


def _finite(value: Any) -> float | None:
    try:
        value = float(value)
    except OverflowError:
        return None
    return value if math.isfinite(value) else None


def to_number(raw: Any) -> float | None:
    """Coerce a resolved metric value to a finite float.

    Numbers (bools count as 0/1) and numeric strings convert; blank or
    non-numeric strings, containers and non-finite results give None.
    """
    if raw is None:
        return None
    if isinstance(raw, (bool, int, float)):
        return _finite(raw)
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        if _DECIMAL.match(text) is None:
            return None
        return _finite(text)
    return None


def parse_decimal(text: str) -> float | None:
    """Parse the leading decimal number of a string, ignoring trailing text."""
    match = _DECIMAL_PREFIX.match(text)
    if match is None:
        return None
    return _finite(match.group(0))


def normalize_sleep(raw: Any) -> float | None:
    """Convert a sleep duration of ambiguous unit into hours.

    Values above 50 are taken to be seconds and divided by 3600; values up
    to and including 50 are already hours.  Strings are parsed first, then
    the same threshold applies.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = _finite(raw)
    elif isinstance(raw, str):
        value = parse_decimal(raw)
    else:
        return None

    if value is None:
        return None
    if value > SLEEP_HOURS_MAX:
        return value / SECONDS_PER_HOUR
    return value
