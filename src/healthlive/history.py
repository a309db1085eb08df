"""Raw export log: append ingested records to a JSONL file and read them back.

Each line is one stored record ``{"ingest_date", "metrics", "workouts",
"payload"}``.  Reading supports the dashboard's recency window syntax
(``60d``, ``8w``, ``3m``, ``1y``).
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Iterable, Mapping

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

DEFAULT_RANGE = "60d"

_RANGE_RE = re.compile(r"(\d+)([dwmy])")


# ---------------------------------------------------------------------------
# Recency window
# ---------------------------------------------------------------------------


def parse_range(text: str | None, now: datetime | None = None) -> datetime | None:
    """Turn a window like ``"60d"`` into the earliest ingestion time to keep.

    Units: ``d`` days, ``w`` weeks (7 days), ``m`` calendar months,
    ``y`` calendar years.  Unrecognized input means "no filter" and returns
    None rather than raising.
    """
    if not text or not isinstance(text, str):
        return None
    match = _RANGE_RE.search(text)
    if match is None:
        return None

    amount = int(match.group(1))
    unit = match.group(2)
    now = now or datetime.now(timezone.utc)

    try:
        if unit == "d":
            return now - timedelta(days=amount)
        if unit == "w":
            return now - timedelta(weeks=amount)
        if unit == "m":
            return now - relativedelta(months=amount)
        return now - relativedelta(years=amount)
    except (OverflowError, ValueError):
        logger.warning("range %r reaches past the calendar; not filtering", text)
        return None


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 ingestion timestamp; naive values are taken as UTC."""
    if isinstance(value, datetime):
        ts = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            ts = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def filter_since(
    records: Iterable[Mapping[str, Any]],
    since: datetime | None,
) -> list[Mapping[str, Any]]:
    """Keep records ingested at or after *since*, oldest first.

    With ``since=None`` nothing is filtered.  Records whose timestamp does
    not parse are dropped only when a filter is active.
    """
    if since is not None and since.tzinfo is None:
        since = since.replace(tzinfo=timezone.utc)

    kept: list[tuple[datetime | None, Mapping[str, Any]]] = []
    for rec in records:
        ts = parse_timestamp(rec.get("ingest_date"))
        if since is not None:
            if ts is None:
                logger.warning("dropping record with unparseable ingest_date %r",
                               rec.get("ingest_date"))
                continue
            if ts < since:
                continue
        kept.append((ts, rec))

    # Stable sort; unparseable timestamps (unfiltered mode) keep their place at the front.
    epoch = datetime.min.replace(tzinfo=timezone.utc)
    kept.sort(key=lambda pair: pair[0] or epoch)
    return [rec for _, rec in kept]


# ---------------------------------------------------------------------------
# JSONL storage
# ---------------------------------------------------------------------------


def append_record(path: str | Path, record: Mapping[str, Any]) -> Path:
    """Append one record as a JSON line, creating parent directories."""
    outpath = Path(path)
    outpath.parent.mkdir(parents=True, exist_ok=True)
    with open(outpath, "a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")
    return outpath


def load_history(
    path: str | Path,
    range_text: str | None = None,
    strict: bool = False,
) -> list[dict[str, Any]]:
    """Load stored records from a JSONL file.

    Args:
        path: JSONL file written by :func:`append_record`.
        range_text: Optional recency window, e.g. ``"60d"``.
        strict: Raise ValueError on malformed lines instead of skipping them.

    Returns:
        Records ordered by ingestion time, oldest first.  A missing file
        yields an empty list.
    """
    inpath = Path(path)
    if not inpath.exists():
        logger.warning("history file %s not found", inpath)
        return []

    records: list[dict[str, Any]] = []
    # Undecodable bytes become U+FFFD so the line fails json.loads below.
    with open(inpath, encoding="utf-8", errors="replace") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                rec = json.loads(line)
            except json.JSONDecodeError as e:
                if strict:
                    raise ValueError(f"{inpath}:{lineno}: invalid JSON ({e})") from e
                logger.warning("%s:%d: skipping invalid JSON line", inpath, lineno)
                continue
            if not isinstance(rec, dict):
                if strict:
                    raise ValueError(f"{inpath}:{lineno}: record is not an object")
                logger.warning("%s:%d: skipping non-object record", inpath, lineno)
                continue
            records.append(rec)

    since = parse_range(range_text)
    records = filter_since(records, since)
    logger.debug("loaded %d record(s) from %s", len(records), inpath)
    return records
