"""Resolve the comparison years for a district's growth calculation."""

from typing import Optional

from config.settings import get_settings
from src.data.models import District, Grade, Numeric, Subject


def _first_reported_year(district: District, subject: Subject, grade: Grade, years) -> Optional[int]:
    """First year in `years` with a numeric score, or None if every year is missing."""
    for year in years:
        if isinstance(district.statewide_test.score(grade, year, subject), Numeric):
            return year
    return None


def resolve_max_year(district: District, subject: Subject, grade: Grade) -> Optional[int]:
    """Latest year with a reported score, searching back from the last year."""
    return _first_reported_year(district, subject, grade, reversed(get_settings().years))


def resolve_min_year(district: District, subject: Subject, grade: Grade) -> Optional[int]:
    """Earliest year with a reported score, searching forward from the first year."""
    return _first_reported_year(district, subject, grade, get_settings().years)


def resolve_year_range(
    district: District, subject: Subject, grade: Grade
) -> Optional[tuple[int, int]]:
    """(max_year, min_year), or None when the district has no usable scores."""
    max_year = resolve_max_year(district, subject, grade)
    min_year = resolve_min_year(district, subject, grade)
    if max_year is None or min_year is None:
        return None
    return max_year, min_year
