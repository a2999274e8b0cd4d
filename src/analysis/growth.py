"""Year-over-year growth for a single district, subject and grade."""

import logging
from typing import Optional

from src.data.errors import DivisionDegenerateError
from src.data.models import District, Grade, Numeric, Subject
from .years import resolve_year_range

logger = logging.getLogger(__name__)


def growth_ratio(numerator: float, denominator: int) -> float:
    """
    Average change per year.

    Zero change over a zero-year span is zero growth; any other zero span
    cannot be expressed and raises DivisionDegenerateError.
    """
    if numerator == 0 and denominator == 0:
        return 0
    if denominator == 0:
        raise DivisionDegenerateError(
            f"Cannot spread a change of {numerator} over a zero-year span"
        )
    return numerator / denominator


def score_change(max_year: int, min_year: int, subject: Subject, district: District, grade: Grade) -> float:
    """Score at max_year minus score at min_year; exactly 0 when the scores match."""
    latest = district.statewide_test.score(grade, max_year, subject)
    earliest = district.statewide_test.score(grade, min_year, subject)
    if not isinstance(latest, Numeric) or not isinstance(earliest, Numeric):
        raise ValueError(
            f"{district.name} has no {subject.value} score for {min_year} or {max_year}"
        )
    if latest.value == earliest.value:
        return 0
    return latest.value - earliest.value


def growth(max_year: int, min_year: int, subject: Subject, district: District, grade: Grade) -> float:
    """Un-truncated growth between two resolved years."""
    numerator = score_change(max_year, min_year, subject, district, grade)
    return growth_ratio(numerator, max_year - min_year)


def district_growth(district: District, subject: Subject, grade: Grade) -> Optional[float]:
    """Growth over the district's widest reported range, or None if it has none."""
    year_range = resolve_year_range(district, subject, grade)
    if year_range is None:
        logger.debug(
            "No grade %s %s scores for %s; excluded", grade.value, subject.value, district.name
        )
        return None
    max_year, min_year = year_range
    return growth(max_year, min_year, subject, district, grade)
