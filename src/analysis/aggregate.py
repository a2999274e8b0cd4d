"""Per-subject and weighted composite growth across every district."""

import math
from collections.abc import Mapping
from numbers import Real
from typing import Optional, Union

from src.data.errors import UnsupportedValueError
from src.data.models import District, Grade, GrowthResult, Subject
from .growth import district_growth
from .ranking import finalize, rank, top, top_n

Weighting = dict[Subject, float]
TopResult = Union[Optional[GrowthResult], list[GrowthResult]]


def normalize_weighting(weighting: Mapping) -> Weighting:
    """
    Key a weighting by Subject.

    Accepts Subject or subject-name keys. Subjects left out weigh 0.
    Weights must be finite, non-negative numbers but need not sum to 1.
    """
    if not isinstance(weighting, Mapping):
        raise UnsupportedValueError(f"{weighting!r} is not a subject-to-weight mapping")
    normalized = {subject: 0.0 for subject in Subject}
    for key, weight in weighting.items():
        subject = Subject.from_value(key)
        if (
            isinstance(weight, bool)
            or not isinstance(weight, Real)
            or not math.isfinite(weight)
            or weight < 0
        ):
            raise UnsupportedValueError(
                f"{weight!r} is not a valid weight for {subject.value}"
            )
        normalized[subject] = float(weight)
    return normalized


def subject_growth(districts: Mapping[str, District], grade: Grade, subject: Subject) -> list[GrowthResult]:
    """Un-truncated growth for each district that has a usable year range."""
    results = []
    for name, district in districts.items():
        value = district_growth(district, subject, grade)
        if value is not None:
            results.append(GrowthResult(name, value))
    return results


def growth_vectors(districts: Mapping[str, District], grade: Grade) -> dict[str, list[float]]:
    """[math, reading, writing] growth per district; unavailable subjects count as 0."""
    by_subject = {
        subject: {r.district_name: r.growth for r in subject_growth(districts, grade, subject)}
        for subject in Subject
    }
    return {
        name: [by_subject[subject].get(name, 0) for subject in Subject]
        for name in districts
    }


def apply_weighting(vector: list[float], weighting: Weighting) -> list[float]:
    """Scale each subject's growth by that subject's weight."""
    return [value * weighting[subject] for value, subject in zip(vector, Subject)]


def composite_growth(
    districts: Mapping[str, District],
    grade: Grade,
    weighting: Mapping,
) -> list[GrowthResult]:
    """Weighted composite growth for every district, truncated and ranked ascending."""
    weights = normalize_weighting(weighting)
    composites = [
        GrowthResult(name, sum(apply_weighting(vector, weights)))
        for name, vector in growth_vectors(districts, grade).items()
    ]
    return rank(finalize(composites))


def all_subjects(
    districts: Mapping[str, District],
    grade: Grade,
    weighting: Mapping,
    count: Optional[int] = None,
) -> TopResult:
    """Highest composite growth, or the `count` highest (highest first)."""
    ranked = composite_growth(districts, grade, weighting)
    if count is None:
        return top(ranked)
    return top_n(ranked, count)


def single_subject(
    districts: Mapping[str, District],
    grade: Grade,
    subject: Subject,
    count: Optional[int] = None,
) -> TopResult:
    """Highest growth for one subject, or the `count` highest (highest first)."""
    ranked = rank(finalize(subject_growth(districts, grade, subject)))
    if count is None:
        return top(ranked)
    return top_n(ranked, count)
