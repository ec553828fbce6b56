"""Test fixtures and factories for provider-id subjects.

This module provides:
- Factory helpers for items (direct subjects) and episodes (derived subjects)
- A plain-object episode stand-in that is not a pydantic model, used to check
  that the helpers work through the subject protocols
- Pytest fixtures for the common "empty", "uninitialised" and "populated" cases
"""

from dataclasses import dataclass
from typing import Optional

import pytest

from tvdbids.subject import EpisodeInfo, ItemInfo


def make_item(provider_ids: Optional[dict[str, str]] = None, name: str = "Test Series") -> ItemInfo:
    """Create an ItemInfo; pass provider_ids=None for an uninitialised mapping."""
    return ItemInfo(name=name, provider_ids=provider_ids)


def make_episode(series_provider_ids: Optional[dict[str, str]] = None, name: str = "Pilot") -> EpisodeInfo:
    """Create an EpisodeInfo with the given series snapshot."""
    return EpisodeInfo(
        name=name,
        index_number=1,
        parent_index_number=1,
        series_name="Test Series",
        series_provider_ids=series_provider_ids,
    )


@dataclass
class PlainEpisode:
    """Host-side episode that only exposes series_provider_ids."""

    series_provider_ids: Optional[dict[str, str]] = None


@dataclass
class PlainItem:
    """Host-side item that only exposes provider_ids and set_provider_id."""

    provider_ids: Optional[dict[str, str]] = None

    def set_provider_id(self, name: str, value: str) -> None:
        if self.provider_ids is None:
            self.provider_ids = {}
        self.provider_ids[name] = value


@pytest.fixture
def uninitialised_item() -> ItemInfo:
    return make_item(None)


@pytest.fixture
def empty_item() -> ItemInfo:
    return make_item({})


@pytest.fixture
def tvdb_item() -> ItemInfo:
    return make_item({"Tvdb": "12345", "Imdb": "tt0303461"})
