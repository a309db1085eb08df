"""Analytics pipeline: raw export records in, dashboard summary out.

This module consumes the list of stored records (as returned by
:func:`healthlive.history.load_history`) and runs the full derivation:
normalize every record, compute baselines over that one snapshot, score the
latest day and build the trend series.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from healthlive.analytics.baseline import compute_baselines
from healthlive.analytics.daily import normalize_history
from healthlive.analytics.scores import score_day
from healthlive.analytics.summary import DashboardSummary, build_summary
from healthlive.analytics.trends import build_trends

logger = logging.getLogger(__name__)


def run_pipeline(records: Sequence[Mapping[str, Any]]) -> DashboardSummary:
    """Run the full derivation on raw records.

    Args:
        records: Raw records ordered by ingestion time, oldest first.

    Returns:
        A populated DashboardSummary.  An empty input yields empty rows,
        all-absent scores and empty trends.
    """
    rows = normalize_history(records)
    baselines = compute_baselines(rows)
    latest = rows[-1] if rows else None

    scores = score_day(latest, baselines, rows)
    trends = build_trends(rows, baselines)

    logger.debug(
        "derived %d day(s); baselines hrv=%s rhr=%s load=%s",
        len(rows), baselines.hrv, baselines.rhr, baselines.training_load,
    )
    return build_summary(rows, baselines, scores, trends)
