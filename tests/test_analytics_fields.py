"""Tests for healthlive.analytics.fields -- candidate-key resolution."""

from healthlive.analytics.fields import (
    CANDIDATE_KEYS,
    HRV_KEYS,
    RHR_KEYS,
    SLEEP_KEYS,
    resolve,
)


class TestResolve:
    def test_first_present_key_wins(self):
        record = {"hrvAverage": 40, "hrv": 55}
        assert resolve(record, HRV_KEYS) == 55

    def test_falls_through_to_later_synonym(self):
        assert resolve({"hrvAvg": 42}, HRV_KEYS) == 42

    def test_none_value_is_skipped(self):
        record = {"restingHeartRate": None, "rhr": 58}
        assert resolve(record, RHR_KEYS) == 58

    def test_zero_is_a_value(self):
        assert resolve({"hrv": 0}, HRV_KEYS) == 0

    def test_no_match(self):
        assert resolve({"heartRate": 70}, HRV_KEYS) is None

    def test_empty_and_none_record(self):
        assert resolve({}, HRV_KEYS) is None
        assert resolve(None, HRV_KEYS) is None

    def test_no_type_coercion(self):
        assert resolve({"sleepDuration": "7.5"}, SLEEP_KEYS) == "7.5"

    def test_case_sensitive(self):
        assert resolve({"Hrv": 50}, HRV_KEYS) is None


class TestCandidateKeys:
    def test_covers_every_metric(self):
        assert set(CANDIDATE_KEYS) == {
            "hrv", "rhr", "steps", "sleep_hours", "training_load",
            "spo2", "respiratory_rate", "temperature",
        }

    def test_hrv_order(self):
        assert HRV_KEYS == ("hrv", "hrvAverage", "hrv_average", "averageHrv", "HRV", "hrvAvg")

    def test_other_lists(self):
        assert CANDIDATE_KEYS["training_load"] == ("trainingLoad", "trimp", "TRIMP", "training_load")
        assert CANDIDATE_KEYS["spo2"] == (
            "oxygenSaturation", "spo2", "SpO2", "blood_oxygen_percentage",
        )
        assert CANDIDATE_KEYS["temperature"] == (
            "temperature", "wristTemperature", "wristTemp", "bodyTemperature",
        )
