"""Errors raised by the provider-identifier helpers.

Absence of an identifier is never an error. The only fault this package
surfaces is a stored identifier that is present but cannot be read as an
integer, which points at corrupted upstream data.
"""


class ProviderIdError(Exception):
    """Base class for provider-identifier errors."""


class ProviderIdFormatError(ProviderIdError, ValueError):
    """A present identifier value is not a valid integer literal.

    Attributes:
        value: The stored string that failed to parse.
    """

    def __init__(self, value: str, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"Provider id {value!r} is not a valid integer")


class ProviderIdOverflowError(ProviderIdFormatError):
    """A present identifier parses as an integer but does not fit in 32 bits."""

    def __init__(self, value: str) -> None:
        super().__init__(value, f"Provider id {value!r} is outside the 32-bit integer range")
