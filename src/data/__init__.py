from .errors import (
    HeadcountError,
    MissingRequiredFieldError,
    UnsupportedValueError,
    DivisionDegenerateError,
    UnknownDistrictError,
)
from .models import Grade, Subject, Numeric, MISSING, StatewideTest, Enrollment, District, GrowthResult
from .repository import DistrictRepository, get_repository

__all__ = [
    "HeadcountError",
    "MissingRequiredFieldError",
    "UnsupportedValueError",
    "DivisionDegenerateError",
    "UnknownDistrictError",
    "Grade",
    "Subject",
    "Numeric",
    "MISSING",
    "StatewideTest",
    "Enrollment",
    "District",
    "GrowthResult",
    "DistrictRepository",
    "get_repository",
]
