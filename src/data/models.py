"""Data models for district test and enrollment records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .errors import UnsupportedValueError
from .metrics import validate_metric


class Grade(Enum):
    """Grade levels that have statewide test records."""

    THIRD = 3
    EIGHTH = 8

    @classmethod
    def from_value(cls, value) -> "Grade":
        """Accept a Grade, 3/8 (int or str), or "third"/"eighth"."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for grade in cls:
                if key in (grade.name.lower(), str(grade.value)):
                    return grade
        elif isinstance(value, int) and not isinstance(value, bool):
            for grade in cls:
                if value == grade.value:
                    return grade
        raise UnsupportedValueError(f"{value} is not a known grade")


class Subject(Enum):
    """Statewide test subjects, in composite-vector order."""

    MATH = "math"
    READING = "reading"
    WRITING = "writing"

    @classmethod
    def from_value(cls, value) -> "Subject":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedValueError(f"{value} is not a known subject")


@dataclass(frozen=True)
class Numeric:
    """A reported proficiency score."""

    value: float


class Missing:
    """Marker for a score the state did not report (N/A, LNE, ...)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing()

Score = Union[Numeric, Missing]


@dataclass(frozen=True)
class StatewideTest:
    """Proficiency scores per grade: year -> subject -> score."""

    # dict-valued fields: compared by value, never hashed
    __hash__ = None

    name: str
    third_grade: dict[int, dict[Subject, Score]] = field(default_factory=dict)
    eighth_grade: dict[int, dict[Subject, Score]] = field(default_factory=dict)

    def for_grade(self, grade: Grade) -> dict[int, dict[Subject, Score]]:
        if grade is Grade.THIRD:
            return self.third_grade
        return self.eighth_grade

    def score(self, grade: Grade, year: int, subject: Subject) -> Score:
        """Score for one year/subject; absent entries read as MISSING."""
        return self.for_grade(grade).get(year, {}).get(subject, MISSING)


@dataclass(frozen=True)
class Enrollment:
    """Enrollment rates per metric: year -> rate."""

    __hash__ = None

    name: str
    kindergarten_participation: dict[int, float] = field(default_factory=dict)
    high_school_graduation: dict[int, float] = field(default_factory=dict)

    def for_metric(self, metric: str) -> dict[int, float]:
        return getattr(self, validate_metric(metric))


@dataclass(frozen=True)
class District:
    """A school district (or the statewide aggregate) and its records."""

    __hash__ = None

    name: str
    statewide_test: Optional[StatewideTest] = None
    enrollment: Optional[Enrollment] = None

    def __post_init__(self):
        # frozen: fill empty records through object.__setattr__
        if self.statewide_test is None:
            object.__setattr__(self, "statewide_test", StatewideTest(name=self.name))
        if self.enrollment is None:
            object.__setattr__(self, "enrollment", Enrollment(name=self.name))


@dataclass(frozen=True)
class GrowthResult:
    """A district's growth value for one ranking query."""

    district_name: str
    growth: float
