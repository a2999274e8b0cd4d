"""Enrollment metrics available for variation and correlation analysis."""

from .errors import UnsupportedValueError

KINDERGARTEN_PARTICIPATION = "kindergarten_participation"
HIGH_SCHOOL_GRADUATION = "high_school_graduation"

# Enrollment metrics, keyed by the Enrollment attribute that stores them
ENROLLMENT_METRICS = {
    KINDERGARTEN_PARTICIPATION: {
        "label": "Kindergartners in Full-Day Program (%)",
        "format": "{:.1%}",
    },
    HIGH_SCHOOL_GRADUATION: {
        "label": "High School Graduation Rate (%)",
        "format": "{:.1%}",
    },
}


def validate_metric(metric_key: str) -> str:
    """Return the metric key, or raise if it is not an enrollment metric."""
    if metric_key not in ENROLLMENT_METRICS:
        raise UnsupportedValueError(f"{metric_key} is not a known enrollment metric")
    return metric_key


def get_metric_label(metric_key: str) -> str:
    """Get display label for a metric."""
    return ENROLLMENT_METRICS.get(metric_key, {}).get("label", metric_key)


def format_metric_value(metric_key: str, value) -> str:
    """Format a metric value for log and error messages."""
    if value is None:
        return "N/A"
    fmt = ENROLLMENT_METRICS.get(metric_key, {}).get("format", "{}")
    try:
        return fmt.format(value)
    except (ValueError, TypeError):
        return str(value)
