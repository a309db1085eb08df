"""Daily wellness scores derived from one day plus the current baselines.

Recovery compares the day's HRV and resting HR against their baselines
(70 / 30 weighting); exertion compares training load against its baseline.
Sleep debt looks at the last seven entries of history.  Nothing here raises:
missing inputs produce None outputs.

Known quirk: the recovery and exertion formulas gate on truthiness, so a
reading of exactly 0 (or a 0 baseline) is treated the same as a missing
reading.  This matches the dashboard the scores were first shown on.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from healthlive.analytics.baseline import Baselines
from healthlive.analytics.daily import NormalizedDay


class TargetZone(str, Enum):
    """Suggested exertion zone for the day, from the recovery score."""

    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"


class SleepQuality(str, Enum):
    """Coarse label for last night's sleep duration."""

    EXCELLENT = "Excellent"
    AVERAGE = "Average"
    POOR = "Poor"


# ---------------------------------------------------------------------------
# Model constants
# ---------------------------------------------------------------------------

W_HRV = 0.7
W_RHR = 0.3

ZONE_HIGH_MIN = 90
ZONE_MODERATE_MIN = 70

SLEEP_EXCELLENT_MIN = 7.5
SLEEP_AVERAGE_MIN = 6.0

OPTIMAL_SLEEP_HOURS = 7.5
SLEEP_DEBT_WINDOW = 7  # entries, not calendar days

TARGET_SLEEP_BASE = 8.0
TARGET_SLEEP_STEP = 0.5
TARGET_RECOVERY_BELOW = 80
TARGET_EXERTION_ABOVE = 120
TARGET_DEBT_ABOVE = 3.0

ALERT_LOW_SPO2 = "Low SpO₂"
ALERT_HIGH_RESPIRATORY_RATE = "High Respiratory Rate"
ALERT_ELEVATED_TEMPERATURE = "Elevated Temperature"

SPO2_ALERT_BELOW = 95.0
RESPIRATORY_ALERT_ABOVE = 20.0
TEMPERATURE_ALERT_ABOVE = 38.0


@dataclass(frozen=True)
class DerivedScores:
    """Scores and flags for a single day."""

    recovery_score: int | None = None  # percent of baseline
    exertion_score: int | None = None  # percent of baseline load
    target_zone: TargetZone | None = None
    sleep_quality: SleepQuality | None = None
    sleep_debt_hours: float | None = None
    target_sleep_hours: float | None = None
    alerts: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (JSON-friendly)."""
        return {
            "recovery_score": self.recovery_score,
            "exertion_score": self.exertion_score,
            "target_zone": self.target_zone.value if self.target_zone else None,
            "sleep_quality": self.sleep_quality.value if self.sleep_quality else None,
            "sleep_debt_hours": self.sleep_debt_hours,
            "target_sleep_hours": self.target_sleep_hours,
            "alerts": list(self.alerts),
        }

    def __repr__(self) -> str:
        return (
            f"DerivedScores(recovery={self.recovery_score}, "
            f"exertion={self.exertion_score}, "
            f"zone={self.target_zone.value if self.target_zone else None}, "
            f"alerts={len(self.alerts)})"
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _present(*values: float | None) -> bool:
    """True when every value is truthy; zero counts as missing."""
    return all(values)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def recovery_ratio(
    hrv: float | None,
    rhr: float | None,
    baselines: Baselines,
) -> float | None:
    """Unrounded recovery percentage, or None if any operand is missing/zero."""
    if not _present(baselines.hrv, hrv, baselines.rhr, rhr):
        return None
    return ((hrv / baselines.hrv) * W_HRV + (baselines.rhr / rhr) * W_RHR) * 100.0


def exertion_ratio(
    training_load: float | None,
    baselines: Baselines,
) -> float | None:
    """Unrounded exertion percentage, or None if either operand is missing/zero."""
    if not _present(baselines.training_load, training_load):
        return None
    return (training_load / baselines.training_load) * 100.0


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify_zone(recovery_score: int | None) -> TargetZone | None:
    if recovery_score is None:
        return None
    if recovery_score >= ZONE_HIGH_MIN:
        return TargetZone.HIGH
    if recovery_score >= ZONE_MODERATE_MIN:
        return TargetZone.MODERATE
    return TargetZone.LOW


def classify_sleep(sleep_hours: float | None) -> SleepQuality | None:
    if sleep_hours is None:
        return None
    if sleep_hours >= SLEEP_EXCELLENT_MIN:
        return SleepQuality.EXCELLENT
    if sleep_hours >= SLEEP_AVERAGE_MIN:
        return SleepQuality.AVERAGE
    return SleepQuality.POOR


def sleep_debt(history: Sequence[NormalizedDay]) -> float | None:
    """Shortfall of the last 7 entries against 7 x 7.5 h, floored at 0.

    Needs at least 7 entries; missing sleep counts as 0 h.
    """
    if len(history) < SLEEP_DEBT_WINDOW:
        return None
    window = history[-SLEEP_DEBT_WINDOW:]
    total = sum(d.sleep_hours if d.sleep_hours is not None else 0.0 for d in window)
    debt = SLEEP_DEBT_WINDOW * OPTIMAL_SLEEP_HOURS - total
    return debt if debt > 0 else 0.0


def target_sleep(
    recovery_score: int | None,
    exertion_score: int | None,
    sleep_debt_hours: float | None,
) -> float | None:
    """Tonight's sleep recommendation in hours (8.0 to 9.5)."""
    if recovery_score is None:
        return None
    hours = TARGET_SLEEP_BASE
    if recovery_score < TARGET_RECOVERY_BELOW:
        hours += TARGET_SLEEP_STEP
    if exertion_score is not None and exertion_score > TARGET_EXERTION_ABOVE:
        hours += TARGET_SLEEP_STEP
    if sleep_debt_hours is not None and sleep_debt_hours > TARGET_DEBT_ABOVE:
        hours += TARGET_SLEEP_STEP
    return hours


def health_alerts(day: NormalizedDay) -> tuple[str, ...]:
    """Threshold alerts in check order; each fires only for a present reading."""
    alerts: list[str] = []
    if day.spo2 is not None and day.spo2 < SPO2_ALERT_BELOW:
        alerts.append(ALERT_LOW_SPO2)
    if day.respiratory_rate is not None and day.respiratory_rate > RESPIRATORY_ALERT_ABOVE:
        alerts.append(ALERT_HIGH_RESPIRATORY_RATE)
    if day.temperature is not None and day.temperature > TEMPERATURE_ALERT_ABOVE:
        alerts.append(ALERT_ELEVATED_TEMPERATURE)
    return tuple(alerts)


# ---------------------------------------------------------------------------
# Composite scoring
# ---------------------------------------------------------------------------


def score_day(
    latest: NormalizedDay | None,
    baselines: Baselines,
    history: Sequence[NormalizedDay],
) -> DerivedScores:
    """Compute every derived score for one day.

    Args:
        latest: The day to score (normally the last entry of *history*).
            None yields an all-absent result.
        baselines: Baselines computed from the same *history*.
        history: Full normalized history; used for the sleep-debt window.

    Returns:
        DerivedScores with None for anything that could not be computed.
    """
    if latest is None:
        return DerivedScores()

    recovery = recovery_ratio(latest.hrv, latest.rhr, baselines)
    recovery_score = round_half_up(recovery) if recovery is not None else None

    exertion = exertion_ratio(latest.training_load, baselines)
    exertion_score = round_half_up(exertion) if exertion is not None else None

    debt = sleep_debt(history)

    return DerivedScores(
        recovery_score=recovery_score,
        exertion_score=exertion_score,
        target_zone=classify_zone(recovery_score),
        sleep_quality=classify_sleep(latest.sleep_hours),
        sleep_debt_hours=debt,
        target_sleep_hours=target_sleep(recovery_score, exertion_score, debt),
        alerts=health_alerts(latest),
    )
