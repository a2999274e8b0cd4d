"""In-memory repository of district records."""

from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .errors import UnknownDistrictError
from .loader import load_districts
from .models import District


class DistrictRepository:
    """Districts indexed by name (case-sensitive)."""

    def __init__(self, districts: Optional[Iterable[District]] = None):
        self._districts: dict[str, District] = {}
        for district in districts or []:
            self.add(district)

    @classmethod
    def from_csv(
        cls,
        data_dir: Optional[Path] = None,
        data_files: Optional[dict] = None,
    ) -> "DistrictRepository":
        """Build a repository from the state's CSV extracts."""
        return cls(load_districts(data_dir, data_files).values())

    def add(self, district: District) -> None:
        self._districts[district.name] = district

    @property
    def districts(self) -> Mapping[str, District]:
        """Read-only view of every district, in insertion order."""
        return MappingProxyType(self._districts)

    def find_by_name(self, name: str) -> District:
        try:
            return self._districts[name]
        except KeyError:
            raise UnknownDistrictError(name) from None

    def snapshot(self) -> Mapping[str, District]:
        """Point-in-time copy for a single query."""
        return MappingProxyType(dict(self._districts))


# Singleton instance
_repository: Optional[DistrictRepository] = None


def get_repository() -> DistrictRepository:
    """Get or create the repository singleton, loaded from the configured data dir."""
    global _repository
    if _repository is None:
        _repository = DistrictRepository.from_csv()
    return _repository
