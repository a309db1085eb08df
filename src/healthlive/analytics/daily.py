"""Per-record normalization into a fixed-shape daily metric row.

Each ingested export is turned into a :class:`NormalizedDay` independently
of every other record; no state is carried between calls.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Iterable, Mapping

from healthlive.analytics.fields import CANDIDATE_KEYS, resolve
from healthlive.analytics.units import normalize_sleep, to_number


@dataclass(frozen=True)
class NormalizedDay:
    """One ingested export reduced to the metrics the dashboard uses."""

    date: str  # "YYYY-MM-DD", or "" when the record had no timestamp
    hrv: float | None = None  # ms
    rhr: float | None = None  # bpm
    steps: float | None = None
    sleep_hours: float | None = None
    training_load: float | None = None
    spo2: float | None = None  # %
    respiratory_rate: float | None = None  # breaths/min
    temperature: float | None = None  # °C

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def __repr__(self) -> str:
        return (
            f"NormalizedDay({self.date or '?'}: "
            f"hrv={self.hrv}, rhr={self.rhr}, "
            f"sleep={self.sleep_hours}, load={self.training_load})"
        )


def _date_part(ingest_date: Any) -> str:
    if ingest_date is None:
        return ""
    if isinstance(ingest_date, date):
        ingest_date = ingest_date.isoformat()
    return str(ingest_date)[:10]


def normalize_record(raw: Mapping[str, Any]) -> NormalizedDay:
    """Normalize one raw export record.

    Args:
        raw: Stored record with ``ingest_date`` and a ``metrics`` mapping
            (which may be missing or None).

    Returns:
        A NormalizedDay; unresolvable or non-numeric metrics are None.
    """
    metrics = raw.get("metrics") or {}
    if not isinstance(metrics, Mapping):
        metrics = {}

    values: dict[str, float | None] = {}
    for name, keys in CANDIDATE_KEYS.items():
        resolved = resolve(metrics, keys)
        if name == "sleep_hours":
            values[name] = normalize_sleep(resolved)
        else:
            values[name] = to_number(resolved)

    return NormalizedDay(date=_date_part(raw.get("ingest_date")), **values)


def normalize_history(records: Iterable[Mapping[str, Any]]) -> list[NormalizedDay]:
    """Normalize every record, keeping order and length."""
    return [normalize_record(r) for r in records]
