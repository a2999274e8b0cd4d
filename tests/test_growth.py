"""Tests for single-district growth and its zero-span edge cases."""

import pytest

from src.analysis.growth import district_growth, growth, growth_ratio, score_change
from src.data.errors import DivisionDegenerateError
from src.data.models import Grade, Subject


class TestGrowthRatio:
    def test_plain_quotient(self):
        assert growth_ratio(15.0, 6) == 2.5

    def test_zero_over_zero_is_zero(self):
        assert growth_ratio(0, 0) == 0

    def test_change_over_zero_span_raises(self):
        with pytest.raises(DivisionDegenerateError):
            growth_ratio(3.0, 0)

    def test_negative_growth(self):
        assert growth_ratio(-3.0, 2) == -1.5


class TestScoreChange:
    def test_difference(self, make_district):
        district = make_district("A", third={"math": {2008: 60.0, 2014: 75.0}})
        assert score_change(2014, 2008, Subject.MATH, district, Grade.THIRD) == 15.0

    def test_equal_scores_are_exactly_zero(self, make_district):
        district = make_district("A", third={"math": {2008: 80.0, 2014: 80.0}})
        assert score_change(2014, 2008, Subject.MATH, district, Grade.THIRD) == 0

    def test_missing_endpoint_raises(self, make_district):
        district = make_district("A", third={"math": {2008: 80.0}})
        with pytest.raises(ValueError):
            score_change(2014, 2008, Subject.MATH, district, Grade.THIRD)


class TestGrowth:
    def test_growth_between_endpoints(self, make_district):
        district = make_district("A", third={"math": {2008: 60.0, 2014: 75.0}})
        assert growth(2014, 2008, Subject.MATH, district, Grade.THIRD) == 2.5

    def test_identical_endpoints_no_growth(self, make_district):
        district = make_district("A", third={"math": {2009: 80.0, 2013: 80.0}})
        assert growth(2013, 2009, Subject.MATH, district, Grade.THIRD) == 0

    def test_same_year_no_growth(self, make_district):
        district = make_district("A", third={"math": {2011: 80.0}})
        assert growth(2011, 2011, Subject.MATH, district, Grade.THIRD) == 0

    def test_growth_is_not_truncated(self, make_district):
        district = make_district("A", third={"math": {2008: 0.0, 2011: 1.0}})
        assert growth(2011, 2008, Subject.MATH, district, Grade.THIRD) == pytest.approx(1 / 3)


class TestDistrictGrowth:
    def test_resolves_range_around_missing_years(self, make_district):
        district = make_district("A", third={"math": {2008: 60.0, 2014: 75.0}})
        assert district_growth(district, Subject.MATH, Grade.THIRD) == 2.5

    def test_unavailable_subject(self, make_district):
        district = make_district("A", third={"math": {2008: 60.0, 2014: 75.0}})
        assert district_growth(district, Subject.READING, Grade.THIRD) is None

    def test_single_reported_year_is_zero(self, make_district):
        district = make_district("A", third={"math": {2010: 60.0}})
        assert district_growth(district, Subject.MATH, Grade.THIRD) == 0
