"""Query surface for growth rankings and enrollment correlations."""

import logging
from typing import Iterable, Optional

from config.settings import get_settings
from src.data.errors import MissingRequiredFieldError, UnsupportedValueError
from src.data.metrics import HIGH_SCHOOL_GRADUATION
from src.data.models import Grade, Subject
from src.data.repository import DistrictRepository
from .aggregate import TopResult, all_subjects, normalize_weighting, single_subject
from .correlation import CorrelationEngine

logger = logging.getLogger(__name__)

GROWTH_OPTIONS = {"grade", "subject", "top", "weighting"}


class HeadcountAnalyst:
    """Answers district growth and correlation questions over a repository."""

    def __init__(self, repository: DistrictRepository):
        self.district_repository = repository
        self.correlation = CorrelationEngine(repository)

    # -------------------------------------------------------------------------
    # Statewide test growth
    # -------------------------------------------------------------------------

    def top_statewide_test_year_over_year_growth(self, **options) -> TopResult:
        """
        Districts with the highest year-over-year statewide test growth.

        Options:
            grade: 3 or 8 (required)
            subject: "math", "reading" or "writing"; without it, growth is
                a weighted composite of all three subjects
            top: return this many results, highest first, instead of one
            weighting: subject -> weight for the composite
                (default 0.333 each); cannot be combined with subject

        Returns a GrowthResult (None if no district has data) or, when top
        is given, a list of GrowthResults.
        """
        grade, subject, count, weighting = self._validate_growth_options(options)
        districts = self.district_repository.snapshot()
        logger.debug("Growth query %s over %d districts", options, len(districts))

        if subject is not None:
            return single_subject(districts, grade, subject, count)
        return all_subjects(districts, grade, weighting, count)

    def _validate_growth_options(self, options: dict):
        unknown = set(options) - GROWTH_OPTIONS
        if unknown:
            raise UnsupportedValueError(f"Unsupported options: {', '.join(sorted(unknown))}")

        if options.get("grade") is None:
            raise MissingRequiredFieldError("A grade must be provided to answer this question")
        grade = Grade.from_value(options["grade"])

        subject = None
        if options.get("subject") is not None:
            subject = Subject.from_value(options["subject"])

        count = options.get("top")
        if count is not None and (isinstance(count, bool) or not isinstance(count, int) or count < 1):
            raise UnsupportedValueError(f"{count!r} is not a valid number of results")

        weighting = options.get("weighting")
        if weighting is not None and subject is not None:
            raise UnsupportedValueError("A weighting only applies across all subjects, not with a subject")
        if weighting is None:
            weighting = get_settings().DEFAULT_WEIGHTING
        weighting = normalize_weighting(weighting)

        return grade, subject, count, weighting

    # -------------------------------------------------------------------------
    # Enrollment variation and correlation
    # -------------------------------------------------------------------------

    def kindergarten_participation_rate_variation(self, name: str, against: str) -> float:
        return self.correlation.participation_variation(name, against)

    def kindergarten_participation_rate_variation_trend(self, name: str, against: str) -> dict[int, float]:
        return self.correlation.participation_trend(name, against)

    def high_school_graduation_rate_variation(self, name: str, against: str) -> float:
        return self.correlation.rate_variation(name, against, HIGH_SCHOOL_GRADUATION)

    def kindergarten_participation_against_high_school_graduation(self, name: str) -> float:
        return self.correlation.participation_graduation_correlation(name)

    def kindergarten_participation_correlates_with_high_school_graduation(
        self,
        for_: Optional[str] = None,
        across: Optional[Iterable[str]] = None,
    ) -> bool:
        """
        Whether participation tracks graduation for one district, the whole
        state (for_="STATEWIDE"), or a list of districts.
        """
        return self.correlation.correlates(for_=for_, across=across)
