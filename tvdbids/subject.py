"""Subjects that carry provider identifiers.

Two shapes of subject are supported:

- **Direct subjects** own a provider-id mapping (`HasProviderIds`). The
  mapping may be absent entirely (``None``), which is distinct from an empty
  mapping. `ItemInfo` is the concrete model.
- **Derived subjects** own no mapping; they expose a snapshot of their parent
  series' mapping (`HasSeriesProviderIds`). `EpisodeInfo` is the concrete model.

Any object with the right attribute satisfies the protocols, so host objects
that are not pydantic models can be passed to the helpers in
`tvdbids.provider_ids` as well.
"""

from typing import Any, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel, Field, field_validator


@runtime_checkable
class HasProviderIds(Protocol):
    """A direct subject: owns a (possibly absent) provider-id mapping."""

    provider_ids: dict[str, str] | None

    def set_provider_id(self, name: str, value: str) -> None: ...


@runtime_checkable
class HasSeriesProviderIds(Protocol):
    """A derived subject: reads the provider ids of its parent series."""

    @property
    def series_provider_ids(self) -> Mapping[str, str] | None: ...


class ItemInfo(BaseModel):
    """Lookup info for a series (or any item that owns its provider ids).

    Unlike most models in this package, ItemInfo is mutable: the identifier
    helpers amend `provider_ids` in place.

    Example:
        ```python
        item = ItemInfo(name="Firefly")
        set_tvdb_id(item, 78874)
        item.provider_ids  # {"Tvdb": "78874"}
        ```
    """

    name: str | None = Field(default=None, description="Display name of the item.")
    year: int | None = Field(default=None, description="Production year, if known.")
    metadata_language: str | None = Field(default=None, description="Preferred metadata language code.")
    provider_ids: dict[str, str] | None = Field(
        default=None,
        description="Provider name to identifier. None means the mapping was never initialised.",
    )

    def get_provider_id(self, name: str) -> str | None:
        """Return the raw stored value for `name`, blank values included."""
        if self.provider_ids is None:
            return None
        return self.provider_ids.get(name)

    def set_provider_id(self, name: str, value: str) -> None:
        """Store `value` under `name`, creating the mapping on first write."""
        if self.provider_ids is None:
            self.provider_ids = {}
        self.provider_ids[name] = value

    def remove_provider_id(self, name: str) -> None:
        if self.provider_ids is not None:
            self.provider_ids.pop(name, None)


class EpisodeInfo(BaseModel, frozen=True):
    """Lookup info for a single episode.

    Episodes are resolved through their series, so an EpisodeInfo carries a
    copy of the series' provider ids taken when it was built. Later changes to
    the series are not visible here; re-derive the episode instead.
    """

    name: str | None = Field(default=None, description="Episode title.")
    index_number: int | None = Field(default=None, description="Episode number within the season.")
    parent_index_number: int | None = Field(default=None, description="Season number.")
    series_name: str | None = Field(default=None, description="Name of the parent series.")
    series_provider_ids: dict[str, str] | None = Field(
        default=None,
        description="Snapshot of the parent series' provider ids.",
    )

    @field_validator("series_provider_ids", mode="after")
    @classmethod
    def _snapshot(cls, value: dict[str, str] | None) -> dict[str, str] | None:
        return None if value is None else dict(value)

    @classmethod
    def from_series(cls, series: HasProviderIds, **fields: Any) -> "EpisodeInfo":
        """Build an episode whose series ids are a snapshot of `series`."""
        fields.setdefault("series_name", getattr(series, "name", None))
        return cls(series_provider_ids=series.provider_ids, **fields)
