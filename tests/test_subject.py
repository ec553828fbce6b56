"""Tests for the item and episode subject models.

This module verifies:
- ItemInfo distinguishes an uninitialised mapping from an empty one
- ItemInfo raw accessors (get/set/remove) used underneath the guarded helpers
- EpisodeInfo holds a snapshot of its series ids, not a live link
- Both models satisfy the subject protocols
"""

import pytest

from tvdbids.provider_ids import has_tvdb_id, set_tvdb_id
from tvdbids.subject import EpisodeInfo, HasProviderIds, HasSeriesProviderIds, ItemInfo

from tests.conftest import make_episode, make_item


class TestItemInfo:
    """Raw provider-id access on direct subjects."""

    def test_mapping_defaults_to_none(self) -> None:
        item = ItemInfo(name="Firefly")
        assert item.provider_ids is None
        assert item.get_provider_id("Tvdb") is None

    def test_set_creates_mapping(self) -> None:
        item = ItemInfo()
        item.set_provider_id("Tvdb", "78874")
        assert item.provider_ids == {"Tvdb": "78874"}

    def test_get_returns_raw_blank_value(self) -> None:
        """The raw accessor does not apply the presence rule."""
        item = make_item({"Tvdb": " "})
        assert item.get_provider_id("Tvdb") == " "
        assert has_tvdb_id(item) is False

    def test_remove(self) -> None:
        item = make_item({"Tvdb": "1", "Imdb": "tt1"})
        item.remove_provider_id("Tvdb")
        item.remove_provider_id("Zap2It")
        assert item.provider_ids == {"Imdb": "tt1"}

    def test_remove_on_uninitialised_mapping(self) -> None:
        item = make_item(None)
        item.remove_provider_id("Tvdb")
        assert item.provider_ids is None

    def test_satisfies_protocol(self) -> None:
        assert isinstance(ItemInfo(), HasProviderIds)
        assert not isinstance(ItemInfo(), HasSeriesProviderIds)


class TestEpisodeInfo:
    """Episodes read a copy of the series ids taken at construction."""

    def test_snapshot_is_a_copy(self) -> None:
        series_ids = {"Tvdb": "999"}
        episode = make_episode(series_ids)

        series_ids["Tvdb"] = "1000"

        assert episode.series_provider_ids == {"Tvdb": "999"}

    def test_from_series(self) -> None:
        series = make_item({"Tvdb": "78874"}, name="Firefly")

        episode = EpisodeInfo.from_series(series, name="Serenity", index_number=1, parent_index_number=1)
        set_tvdb_id(series, 1)

        assert episode.series_name == "Firefly"
        assert episode.series_provider_ids == {"Tvdb": "78874"}

    def test_from_series_without_ids(self) -> None:
        episode = EpisodeInfo.from_series(make_item(None))
        assert episode.series_provider_ids is None
        assert has_tvdb_id(episode) is False

    def test_is_frozen(self) -> None:
        episode = make_episode({"Tvdb": "999"})
        with pytest.raises(Exception):  # Pydantic validation error
            episode.series_provider_ids = {}  # type: ignore

    def test_satisfies_protocol(self) -> None:
        assert isinstance(make_episode(), HasSeriesProviderIds)
