"""Dashboard summary aggregator.

Bundles the table rows, the latest day's scores and the trend series into a
single DashboardSummary that is JSON-serializable.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from healthlive.analytics.baseline import Baselines
from healthlive.analytics.daily import NormalizedDay
from healthlive.analytics.scores import DerivedScores
from healthlive.analytics.trends import TrendSeries


@dataclass
class DashboardSummary:
    """Everything a renderer needs for one dashboard pass."""

    rows: list[NormalizedDay] = field(default_factory=list)
    baselines: Baselines = field(default_factory=Baselines)
    latest: DerivedScores = field(default_factory=DerivedScores)
    trends: TrendSeries = field(default_factory=TrendSeries)

    @property
    def latest_date(self) -> str | None:
        return self.rows[-1].date if self.rows else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (JSON-friendly)."""
        return {
            "latest_date": self.latest_date,
            "baselines": self.baselines.to_dict(),
            "latest": self.latest.to_dict(),
            "rows": [r.to_dict() for r in self.rows],
            "trends": self.trends.to_dict(),
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def __repr__(self) -> str:
        return (
            f"DashboardSummary(days={len(self.rows)}, "
            f"latest={self.latest_date}, "
            f"recovery={self.latest.recovery_score}, "
            f"exertion={self.latest.exertion_score})"
        )


def build_summary(
    rows: list[NormalizedDay],
    baselines: Baselines,
    latest: DerivedScores,
    trends: TrendSeries,
) -> DashboardSummary:
    """Build a dashboard summary from already-derived parts."""
    return DashboardSummary(rows=list(rows), baselines=baselines, latest=latest, trends=trends)
