"""Shared builders for district records."""

import pytest

from src.data.models import District, Enrollment, MISSING, Numeric, StatewideTest, Subject
from src.data.repository import DistrictRepository

YEARS = range(2008, 2015)


def grade_scores(subject_scores: dict) -> dict:
    """{"math": {2008: 60.0}} -> {year: {Subject: Score}} with every year present."""
    grade = {}
    for year in YEARS:
        grade[year] = {}
        for subject in Subject:
            value = subject_scores.get(subject.value, {}).get(year)
            grade[year][subject] = MISSING if value is None else Numeric(value)
    return grade


def build_district(name, third=None, eighth=None, kindergarten=None, graduation=None) -> District:
    return District(
        name=name,
        statewide_test=StatewideTest(
            name=name,
            third_grade=grade_scores(third or {}),
            eighth_grade=grade_scores(eighth or {}),
        ),
        enrollment=Enrollment(
            name=name,
            kindergarten_participation=dict(kindergarten or {}),
            high_school_graduation=dict(graduation or {}),
        ),
    )


@pytest.fixture
def make_district():
    return build_district


@pytest.fixture
def growth_repository() -> DistrictRepository:
    """
    Third grade growth (math / reading / writing):
        ACADEMY 20   2.5 / 1.0 / 0.5
        ADAMS        1.0 / 0.0 / --
        BOULDER      0.5 / 1.5 / 1.0
        EMPTY        --  / --  / --
    """
    return DistrictRepository([
        build_district(
            "ACADEMY 20",
            third={
                "math": {2008: 60.0, 2014: 75.0},
                "reading": {2008: 50.0, 2011: 53.0},
                "writing": {2010: 40.0, 2012: 41.0},
            },
        ),
        build_district(
            "ADAMS",
            third={
                "math": {2009: 70.0, 2013: 74.0},
                "reading": {2008: 80.0, 2014: 80.0},
            },
        ),
        build_district(
            "BOULDER",
            third={
                "math": {2008: 50.0, 2012: 52.0},
                "reading": {2010: 60.0, 2014: 66.0},
                "writing": {2008: 30.0, 2014: 36.0},
            },
            eighth={"math": {2008: 40.0, 2010: 44.0}},
        ),
        build_district("EMPTY"),
    ])


@pytest.fixture
def enrollment_repository() -> DistrictRepository:
    """
    Statewide averages: participation 0.5, graduation 0.8.
    CORRELATED tracks the state (1.0); LOW_PARTICIPATION does not (0.5).
    """
    return DistrictRepository([
        build_district(
            "COLORADO",
            kindergarten={2008: 0.5, 2009: 0.5},
            graduation={2010: 0.8, 2011: 0.8},
        ),
        build_district(
            "CORRELATED",
            kindergarten={2008: 0.5, 2009: 0.5},
            graduation={2010: 0.8, 2011: 0.8},
        ),
        build_district(
            "LOW_PARTICIPATION",
            kindergarten={2008: 0.25, 2009: 0.25},
            graduation={2010: 0.8, 2011: 0.8},
        ),
    ])
