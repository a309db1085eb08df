"""Per-day recovery and exertion series for charting.

Days without the inputs for a value keep a None placeholder instead of
being dropped, so ``dates``, ``recovery`` and ``exertion`` always line up
with the table rows they are drawn next to.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Sequence

from healthlive.analytics.baseline import Baselines
from healthlive.analytics.daily import NormalizedDay
from healthlive.analytics.scores import exertion_ratio, recovery_ratio


@dataclass
class TrendSeries:
    """Parallel per-day series (unrounded)."""

    dates: list[str] = field(default_factory=list)
    recovery: list[float | None] = field(default_factory=list)  # left axis, %
    exertion: list[float | None] = field(default_factory=list)  # right axis

    def __len__(self) -> int:
        return len(self.dates)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def build_trends(history: Sequence[NormalizedDay], baselines: Baselines) -> TrendSeries:
    """Map every day of history onto its recovery and exertion value."""
    return TrendSeries(
        dates=[d.date for d in history],
        recovery=[recovery_ratio(d.hrv, d.rhr, baselines) for d in history],
        exertion=[exertion_ratio(d.training_load, baselines) for d in history],
    )
