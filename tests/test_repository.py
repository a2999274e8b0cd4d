"""Tests for the district repository: lookups, snapshots and the singleton."""

from unittest.mock import patch

import pytest

from src.data import repository as repository_module
from src.data.errors import UnknownDistrictError
from src.data.repository import DistrictRepository, get_repository


class TestDistrictRepository:
    def test_find_by_name(self, growth_repository):
        assert growth_repository.find_by_name("ADAMS").name == "ADAMS"

    def test_find_by_name_is_case_sensitive(self, growth_repository):
        with pytest.raises(UnknownDistrictError):
            growth_repository.find_by_name("adams")

    def test_unknown_district_is_a_lookup_error(self, growth_repository):
        with pytest.raises(LookupError, match="NOWHERE is not a known district"):
            growth_repository.find_by_name("NOWHERE")

    def test_districts_in_insertion_order(self, growth_repository):
        assert list(growth_repository.districts) == ["ACADEMY 20", "ADAMS", "BOULDER", "EMPTY"]

    def test_districts_is_read_only(self, growth_repository, make_district):
        with pytest.raises(TypeError):
            growth_repository.districts["DENVER"] = make_district("DENVER")

    def test_snapshot_is_isolated(self, growth_repository, make_district):
        snapshot = growth_repository.snapshot()
        growth_repository.add(make_district("DENVER"))
        assert "DENVER" not in snapshot
        assert "DENVER" in growth_repository.districts


class TestFromCsv:
    @patch("src.data.repository.load_districts")
    def test_builds_from_loaded_districts(self, mock_load, make_district):
        mock_load.return_value = {"ADAMS": make_district("ADAMS")}
        repo = DistrictRepository.from_csv("/data")
        mock_load.assert_called_once_with("/data", None)
        assert list(repo.districts) == ["ADAMS"]


class TestGetRepository:
    def test_singleton(self, monkeypatch):
        monkeypatch.setattr(repository_module, "_repository", None)
        with patch.object(DistrictRepository, "from_csv", return_value=DistrictRepository()) as mock_from_csv:
            first = get_repository()
            second = get_repository()
        assert first is second
        mock_from_csv.assert_called_once()
