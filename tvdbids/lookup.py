"""Presence rule and the result type of a provider-id lookup."""

from pydantic import BaseModel, Field, field_validator


def has_value(value: str | None) -> bool:
    """True if `value` is not None and has at least one non-whitespace character."""
    return value is not None and bool(value.strip())


class ProviderIdLookup(BaseModel, frozen=True):
    """Outcome of looking up one provider id on a subject.

    `found` is derived from `value`, and blank values are collapsed to None on
    construction, so a failed lookup can never carry a stale or blank value
    alongside it.

    A lookup is truthy exactly when it found a value:

        ```python
        if result := lookup_tvdb_id(episode):
            fetch_series(result.value)
        ```
    """

    value: str | None = Field(default=None, description="The stored identifier, present only when found.")

    @field_validator("value", mode="after")
    @classmethod
    def _blank_is_absent(cls, value: str | None) -> str | None:
        return value if has_value(value) else None

    @property
    def found(self) -> bool:
        return self.value is not None

    def __bool__(self) -> bool:
        return self.found

    @classmethod
    def of(cls, value: str | None) -> "ProviderIdLookup":
        return cls(value=value) if has_value(value) else NOT_FOUND


NOT_FOUND = ProviderIdLookup()
