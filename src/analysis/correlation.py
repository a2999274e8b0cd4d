"""Kindergarten participation vs. high school graduation variation and correlation."""

import logging
from typing import Iterable, Mapping, Optional

from config.settings import get_settings
from src.data.clean import three_round, three_truncate
from src.data.errors import (
    DivisionDegenerateError,
    MissingRequiredFieldError,
    UnknownDistrictError,
    UnsupportedValueError,
)
from src.data.metrics import (
    HIGH_SCHOOL_GRADUATION,
    KINDERGARTEN_PARTICIPATION,
    format_metric_value,
    get_metric_label,
    validate_metric,
)
from src.data.models import District
from src.data.repository import DistrictRepository

logger = logging.getLogger(__name__)


def _ratio(numerator: float, denominator: float, description: str) -> float:
    if denominator == 0:
        raise DivisionDegenerateError(f"Cannot compare {description}: denominator is 0")
    return numerator / denominator


def _find(districts: Mapping[str, District], name: str) -> District:
    try:
        return districts[name]
    except KeyError:
        raise UnknownDistrictError(name) from None


class CorrelationEngine:
    """
    Compares enrollment metrics between districts.

    A district's variation is its average rate divided by a comparison
    district's average rate. Kindergarten participation "correlates" with
    graduation for a district when the ratio of those two variations falls
    within the configured bounds, and for a group when enough of its
    members correlate individually.

    Every public query reads from a single repository snapshot.
    """

    def __init__(self, repository: DistrictRepository):
        self.repository = repository
        settings = get_settings()
        self.statewide_district = settings.STATEWIDE_DISTRICT
        self.statewide_query = settings.STATEWIDE_QUERY
        self.lower_bound = settings.CORRELATION_LOWER_BOUND
        self.upper_bound = settings.CORRELATION_UPPER_BOUND
        self.group_threshold = settings.GROUP_CORRELATION_THRESHOLD

    # -------------------------------------------------------------------------
    # Averages and variation
    # -------------------------------------------------------------------------

    def average_metric(self, name: str, metric: str) -> float:
        """Mean of every year's rate, truncated to three decimals."""
        return self._average(self.repository.snapshot(), name, metric)

    def rate_variation(self, name: str, against: str, metric: str) -> float:
        """District average over comparison average, rounded to three decimals."""
        return self._variation(self.repository.snapshot(), name, against, metric)

    def participation_variation(self, name: str, against: str) -> float:
        return self.rate_variation(name, against, KINDERGARTEN_PARTICIPATION)

    def graduation_variation(self, name: str, against: str) -> float:
        return self.rate_variation(name, against, HIGH_SCHOOL_GRADUATION)

    def variation_trend(self, name: str, against: str, metric: str) -> dict[int, float]:
        """Year -> truncated ratio, for the years both districts report."""
        validate_metric(metric)
        districts = self.repository.snapshot()
        rates = _find(districts, name).enrollment.for_metric(metric)
        baseline = _find(districts, against).enrollment.for_metric(metric)

        trend = {}
        for year in sorted(rates):
            if year not in baseline:
                logger.debug("%s has no %s for %s; skipped", against, metric, year)
                continue
            trend[year] = three_truncate(
                _ratio(rates[year], baseline[year], f"{name} to {against} in {year}")
            )
        return trend

    def participation_trend(self, name: str, against: str) -> dict[int, float]:
        return self.variation_trend(name, against, KINDERGARTEN_PARTICIPATION)

    def participation_graduation_correlation(self, name: str) -> float:
        """Participation variation divided by graduation variation, both against the state."""
        return self._participation_graduation(self.repository.snapshot(), name)

    # -------------------------------------------------------------------------
    # Correlation checks
    # -------------------------------------------------------------------------

    def validator(self, value: float) -> bool:
        """Whether a single district's variation counts as correlated."""
        return self.lower_bound <= value <= self.upper_bound

    def group_validator(self, fraction: float) -> bool:
        """Whether enough of a group correlates for the group to count."""
        return fraction >= self.group_threshold

    def correlates_for(self, name: str) -> bool:
        districts = self.repository.snapshot()
        if name == self.statewide_query:
            return self._group_correlates(districts, list(districts))
        return self.validator(self._participation_graduation(districts, name))

    def correlates_across(self, names: Iterable[str]) -> bool:
        if isinstance(names, str):
            raise UnsupportedValueError(f"Expected a list of districts, got the single name {names!r}")
        return self._group_correlates(self.repository.snapshot(), list(names))

    def correlates(self, for_: Optional[str] = None, across: Optional[Iterable[str]] = None) -> bool:
        """Answer for a single district (or STATEWIDE) or across a list of districts."""
        if for_ is None and across is None:
            raise MissingRequiredFieldError("Either a district or a list of districts must be provided")
        if for_ is not None and across is not None:
            raise UnsupportedValueError("Provide a single district or a list of districts, not both")
        if for_ is not None:
            return self.correlates_for(for_)
        return self.correlates_across(across)

    # -------------------------------------------------------------------------
    # Snapshot helpers
    # -------------------------------------------------------------------------

    def _average(self, districts: Mapping[str, District], name: str, metric: str) -> float:
        rates = _find(districts, name).enrollment.for_metric(metric)
        if not rates:
            raise DivisionDegenerateError(f"{name} has no {get_metric_label(metric)} data to average")
        average = three_truncate(sum(rates.values()) / len(rates))
        logger.debug("%s average %s: %s", name, metric, format_metric_value(metric, average))
        return average

    def _variation(self, districts: Mapping[str, District], name: str, against: str, metric: str) -> float:
        return three_round(
            _ratio(
                self._average(districts, name, metric),
                self._average(districts, against, metric),
                f"{name} to {against} {get_metric_label(metric)}",
            )
        )

    def _participation_graduation(self, districts: Mapping[str, District], name: str) -> float:
        participation = self._variation(districts, name, self.statewide_district, KINDERGARTEN_PARTICIPATION)
        graduation = _ratio(
            self._average(districts, name, HIGH_SCHOOL_GRADUATION),
            self._average(districts, self.statewide_district, HIGH_SCHOOL_GRADUATION),
            f"{name} to {self.statewide_district} graduation",
        )
        return three_round(_ratio(participation, graduation, f"{name} participation to graduation"))

    def _group_correlates(self, districts: Mapping[str, District], names: list[str]) -> bool:
        if not names:
            raise UnsupportedValueError("At least one district is required to check a group correlation")
        correlated = 0
        for name in names:
            try:
                value = self._participation_graduation(districts, name)
            except DivisionDegenerateError as e:
                logger.debug("Counting %s as uncorrelated: %s", name, e)
                continue
            if self.validator(value):
                correlated += 1
        fraction = correlated / len(names)
        logger.debug("%d of %d districts correlate (%.3f)", correlated, len(names), fraction)
        return self.group_validator(fraction)
