"""Tests for the enrollment metric registry and helpers."""

import pytest

from src.data.errors import UnsupportedValueError
from src.data.metrics import (
    ENROLLMENT_METRICS,
    format_metric_value,
    get_metric_label,
    validate_metric,
)


class TestMetrics:
    def test_all_metrics_have_required_keys(self):
        for key, meta in ENROLLMENT_METRICS.items():
            assert "label" in meta, f"{key} missing 'label'"
            assert "format" in meta, f"{key} missing 'format'"

    def test_expected_metrics_exist(self):
        assert set(ENROLLMENT_METRICS) == {"kindergarten_participation", "high_school_graduation"}


class TestValidateMetric:
    def test_known_metric(self):
        assert validate_metric("high_school_graduation") == "high_school_graduation"

    def test_unknown_metric_raises(self):
        with pytest.raises(UnsupportedValueError, match="dropout_rate"):
            validate_metric("dropout_rate")


class TestGetMetricLabel:
    def test_known_metric(self):
        assert get_metric_label("kindergarten_participation") == "Kindergartners in Full-Day Program (%)"

    def test_unknown_metric_returns_key(self):
        assert get_metric_label("nonexistent") == "nonexistent"


class TestFormatMetricValue:
    def test_percentage(self):
        assert format_metric_value("high_school_graduation", 0.895) == "89.5%"

    def test_none_returns_na(self):
        assert format_metric_value("high_school_graduation", None) == "N/A"

    def test_unknown_metric_uses_bare_format(self):
        assert format_metric_value("nonexistent", 3) == "3"
