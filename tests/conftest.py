"""Shared fixtures and helpers for the healthlive test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from healthlive.analytics.daily import NormalizedDay


# ---------------------------------------------------------------------------
# Record-building helpers
# ---------------------------------------------------------------------------


def make_raw_record(
    ingest_date: str | None = "2024-02-13T07:30:00.000Z",
    workouts: dict | None = None,
    **metrics: Any,
) -> dict:
    """Build a stored export record with the given vendor metric fields."""
    return {
        "ingest_date": ingest_date,
        "metrics": dict(metrics) if metrics else None,
        "workouts": workouts,
    }


def make_day(date: str = "2024-02-13", **fields: float | None) -> NormalizedDay:
    """Build a NormalizedDay with only the given metrics set."""
    return NormalizedDay(date=date, **fields)


def make_week(
    sleep_hours: list[float | None],
    start_day: int = 1,
    **fields: float | None,
) -> list[NormalizedDay]:
    """One NormalizedDay per sleep value, consecutive February 2024 dates."""
    return [
        NormalizedDay(date=f"2024-02-{start_day + i:02d}", sleep_hours=s, **fields)
        for i, s in enumerate(sleep_hours)
    ]


# ---------------------------------------------------------------------------
# JSONL history helpers
# ---------------------------------------------------------------------------


def write_jsonl(path: Path, entries: list) -> Path:
    """Write a list of values as JSONL to the given path."""
    with open(path, "w", encoding="utf-8") as f:
        for entry in entries:
            f.write(json.dumps(entry) + "\n")
    return path


@pytest.fixture
def sample_records() -> list[dict]:
    """Eight days of exports using a mix of vendor field names."""
    return [
        make_raw_record(f"2024-02-{d:02d}T07:00:00Z",
                        hrv=50 + d, restingHeartRate=60 - d % 3,
                        sleepDuration=27000 + 600 * d, trimp=100 + 10 * d,
                        stepCount=str(8000 + 100 * d), oxygenSaturation=97)
        for d in range(1, 9)
    ]
