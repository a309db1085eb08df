"""Vendor field-name resolution.

Health Auto Export (and the apps feeding it) are inconsistent about what a
metric is called.  Each semantic metric has a fixed, priority-ordered list of
known synonyms; :func:`resolve` picks the first one that carries a value.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence


# ---------------------------------------------------------------------------
# Candidate-key lists (priority order matters)
# ---------------------------------------------------------------------------

HRV_KEYS = ("hrv", "hrvAverage", "hrv_average", "averageHrv", "HRV", "hrvAvg")
RHR_KEYS = (
    "restingHeartRate",
    "rhr",
    "resting_heart_rate",
    "restingHeartRateAvg",
    "RHR",
)
STEPS_KEYS = ("steps", "stepCount", "step_count", "dailyStepCount")
SLEEP_KEYS = ("sleepHours", "sleepDuration", "totalSleepTime", "sleepDurationHours")
TRAINING_LOAD_KEYS = ("trainingLoad", "trimp", "TRIMP", "training_load")
SPO2_KEYS = ("oxygenSaturation", "spo2", "SpO2", "blood_oxygen_percentage")
RESPIRATORY_RATE_KEYS = ("respiratoryRate", "respirationRate", "respiratory_rate")
TEMPERATURE_KEYS = ("temperature", "wristTemperature", "wristTemp", "bodyTemperature")

# NormalizedDay field name → candidate keys
CANDIDATE_KEYS: dict[str, tuple[str, ...]] = {
    "hrv": HRV_KEYS,
    "rhr": RHR_KEYS,
    "steps": STEPS_KEYS,
    "sleep_hours": SLEEP_KEYS,
    "training_load": TRAINING_LOAD_KEYS,
    "spo2": SPO2_KEYS,
    "respiratory_rate": RESPIRATORY_RATE_KEYS,
    "temperature": TEMPERATURE_KEYS,
}


def resolve(record: Mapping[str, Any] | None, candidate_keys: Sequence[str]) -> Any:
    """Return the value of the first candidate key that is present and not None.

    The value is returned untouched (no type coercion).  A ``None`` record
    behaves like an empty mapping.
    """
    if not record:
        return None
    for key in candidate_keys:
        value = record.get(key)
        if value is not None:
            return value
    return None
