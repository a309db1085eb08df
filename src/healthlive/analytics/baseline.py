"""Rolling baselines over the supplied history.

Baselines are plain means over every day that has the metric.  They are
recomputed from scratch on each call, so the baseline and the day being
scored always come from the same snapshot of history.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Callable, Sequence

import numpy as np

from healthlive.analytics.daily import NormalizedDay


@dataclass(frozen=True)
class Baselines:
    """Per-metric means used as the reference for scoring."""

    hrv: float | None = None
    rhr: float | None = None
    training_load: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def baseline(
    history: Sequence[NormalizedDay],
    selector: Callable[[NormalizedDay], float | None],
) -> float | None:
    """Mean of ``selector(day)`` over days where it is a finite number.

    Returns None when no day has a value.
    """
    values = [
        v for v in (selector(day) for day in history)
        if v is not None and math.isfinite(v)
    ]
    if not values:
        return None
    return float(np.mean(np.asarray(values, dtype=np.float64)))


def compute_baselines(history: Sequence[NormalizedDay]) -> Baselines:
    """Build HRV, RHR and training-load baselines from one history snapshot."""
    return Baselines(
        hrv=baseline(history, lambda d: d.hrv),
        rhr=baseline(history, lambda d: d.rhr),
        training_load=baseline(history, lambda d: d.training_load),
    )
