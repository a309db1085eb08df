"""Tests for healthlive.analytics.baseline -- rolling means."""

import pytest

from healthlive.analytics.baseline import Baselines, baseline, compute_baselines

from tests.conftest import make_day


class TestBaseline:
    def test_mean(self):
        days = [make_day(hrv=60), make_day(hrv=70), make_day(hrv=80)]
        assert baseline(days, lambda d: d.hrv) == 70.0

    def test_empty_history(self):
        assert baseline([], lambda d: d.hrv) is None

    def test_all_absent(self):
        days = [make_day(), make_day(rhr=60)]
        assert baseline(days, lambda d: d.hrv) is None

    def test_skips_absent_days(self):
        days = [make_day(hrv=40), make_day(), make_day(hrv=60)]
        assert baseline(days, lambda d: d.hrv) == 50.0

    def test_zero_counts_toward_mean(self):
        days = [make_day(training_load=0), make_day(training_load=100)]
        assert baseline(days, lambda d: d.training_load) == 50.0

    def test_order_independent(self):
        days = [make_day(rhr=r) for r in (55, 61, 58, 64)]
        assert baseline(days, lambda d: d.rhr) == pytest.approx(
            baseline(list(reversed(days)), lambda d: d.rhr)
        )

    def test_returns_plain_float(self):
        result = baseline([make_day(hrv=50)], lambda d: d.hrv)
        assert type(result) is float


class TestComputeBaselines:
    def test_all_metrics(self):
        days = [
            make_day(hrv=50, rhr=60, training_load=100),
            make_day(hrv=70, rhr=50, training_load=None),
        ]
        b = compute_baselines(days)
        assert b == Baselines(hrv=60.0, rhr=55.0, training_load=100.0)

    def test_empty(self):
        assert compute_baselines([]) == Baselines()

    def test_to_dict(self):
        assert Baselines(hrv=1.0).to_dict() == {"hrv": 1.0, "rhr": None, "training_load": None}
