"""Derivation engine turning raw Health Auto Export records into wellness scores.

Modules:
    fields    -- Vendor field-name resolution (candidate-key lists)
    units     -- Numeric coercion and sleep unit disambiguation
    daily     -- Per-record normalization into NormalizedDay rows
    baseline  -- Rolling means over the supplied history
    scores    -- Recovery/exertion scores, classifications, sleep debt, alerts
    trends    -- Per-day recovery/exertion series for charting
    summary   -- Dashboard summary aggregation
    pipeline  -- End-to-end derivation
"""

from healthlive.analytics.fields import CANDIDATE_KEYS, resolve
from healthlive.analytics.units import normalize_sleep, to_number
from healthlive.analytics.daily import NormalizedDay, normalize_record, normalize_history
from healthlive.analytics.baseline import Baselines, baseline, compute_baselines
from healthlive.analytics.scores import (
    DerivedScores,
    SleepQuality,
    TargetZone,
    score_day,
)
from healthlive.analytics.trends import TrendSeries, build_trends
from healthlive.analytics.summary import DashboardSummary, build_summary
from healthlive.analytics.pipeline import run_pipeline

__all__ = [
    # fields
    "CANDIDATE_KEYS",
    "resolve",
    # units
    "normalize_sleep",
    "to_number",
    # daily
    "NormalizedDay",
    "normalize_record",
    "normalize_history",
    # baseline
    "Baselines",
    "baseline",
    "compute_baselines",
    # scores
    "DerivedScores",
    "SleepQuality",
    "TargetZone",
    "score_day",
    # trends
    "TrendSeries",
    "build_trends",
    # summary
    "DashboardSummary",
    "build_summary",
    # pipeline
    "run_pipeline",
]
