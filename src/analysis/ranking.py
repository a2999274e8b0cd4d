"""Order growth results and pick the highest."""

from typing import Iterable, Optional

from src.data.clean import three_truncate
from src.data.models import GrowthResult


def finalize(results: Iterable[GrowthResult]) -> list[GrowthResult]:
    """Truncate every growth value to three decimals for presentation."""
    return [GrowthResult(r.district_name, three_truncate(r.growth)) for r in results]


def rank(results: Iterable[GrowthResult]) -> list[GrowthResult]:
    """Ascending by growth; equal growth keeps its original order."""
    return sorted(results, key=lambda r: r.growth)


def top_n(results: Iterable[GrowthResult], n: int) -> list[GrowthResult]:
    """
    The n highest results, highest first.

    Pops from the end of the ascending ranking, so among ties the district
    that came later in the input is returned first. Returns fewer than n
    when fewer results exist.
    """
    ranked = rank(results)
    return [ranked.pop() for _ in range(min(n, len(ranked)))]


def top(results: Iterable[GrowthResult]) -> Optional[GrowthResult]:
    """The single highest result, or None when there are none."""
    highest = top_n(results, 1)
    return highest[0] if highest else None
