"""Check, get and set provider ids on items and episodes.

Every function here accepts either a direct subject (anything with a
`provider_ids` mapping, usually an `ItemInfo`) or a derived subject (anything
with `series_provider_ids`, usually an `EpisodeInfo`). Episodes are read
through their series snapshot. Only direct subjects can be written.

A value counts as present only if it is non-None and not blank; blank values
are treated exactly like missing ones on read and on write. Missing subjects
and missing mappings are "not present" and never raise.

The TVDB helpers use the key of `MetadataProvider.TVDB`, which is the
configured `tvdbids.plugin.PROVIDER_ID`, so they agree with enum lookups and
with `is_supported`.
"""

import re
from typing import Any, Mapping

from tvdbids.errors import ProviderIdFormatError, ProviderIdOverflowError
from tvdbids.logging import setup_logging
from tvdbids.lookup import NOT_FOUND, ProviderIdLookup, has_value
from tvdbids.plugin import PLUGIN_CONFIG
from tvdbids.provider import SUPPORTED_PROVIDERS, MetadataProvider, provider_name
from tvdbids.subject import HasProviderIds, HasSeriesProviderIds

logger = setup_logging(PLUGIN_CONFIG.log_level)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

# Optional surrounding whitespace, optional sign, ASCII digits only.
_INVARIANT_INT = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def _provider_ids_of(subject: Any) -> Mapping[str, str] | None:
    """Return the mapping that answers lookups for `subject`, if any."""
    if subject is None:
        return None
    if isinstance(subject, HasSeriesProviderIds):
        return subject.series_provider_ids
    return getattr(subject, "provider_ids", None)


def _lookup(provider_ids: Mapping[str, str] | None, name: str) -> ProviderIdLookup:
    if provider_ids is None:
        return NOT_FOUND
    return ProviderIdLookup.of(provider_ids.get(name))


def lookup_provider_id(subject: Any, provider: MetadataProvider | str) -> ProviderIdLookup:
    """Look up the id stored for `provider` on `subject`.

    Args:
        subject: An item, an episode, or None.
        provider: A MetadataProvider or any provider name.

    Returns:
        A found lookup carrying the stored value, or NOT_FOUND when the
        subject, its mapping or the key is missing, or the value is blank.
    """
    return _lookup(_provider_ids_of(subject), provider_name(provider))


def has_provider_id(subject: Any, provider: MetadataProvider | str) -> bool:
    """True if `subject` has a present value for `provider`."""
    return lookup_provider_id(subject, provider).found


def is_supported(subject: Any) -> bool:
    """True if `subject` has a present id for at least one supported provider."""
    return any(has_provider_id(subject, provider) for provider in SUPPORTED_PROVIDERS)


def lookup_tvdb_id(subject: Any) -> ProviderIdLookup:
    return lookup_provider_id(subject, MetadataProvider.TVDB)


def has_tvdb_id(subject: Any) -> bool:
    """True if `subject` (or its series, for an episode) has a TVDB id stored."""
    return lookup_tvdb_id(subject).found


def parse_invariant_int(value: str | None) -> int:
    """Convert a stored identifier to a 32-bit integer.

    None converts to 0. Any other input must be an optionally signed run of
    ASCII digits, optionally surrounded by whitespace.

    Raises:
        ProviderIdFormatError: `value` is not an integer literal.
        ProviderIdOverflowError: `value` does not fit in a signed 32-bit int.
    """
    if value is None:
        return 0
    if not _INVARIANT_INT.fullmatch(value):
        raise ProviderIdFormatError(value)
    number = int(value)
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise ProviderIdOverflowError(value)
    return number


def get_tvdb_id(subject: Any) -> int:
    """Return the TVDB id of `subject` as an integer, or 0 if it has none.

    Raises:
        ProviderIdFormatError: a TVDB id is stored but is not an integer.
    """
    result = lookup_tvdb_id(subject)
    try:
        return parse_invariant_int(result.value)
    except ProviderIdFormatError:
        logger.warning("Stored %s id %r is not an integer", provider_name(MetadataProvider.TVDB), result.value)
        raise


def set_provider_id_if_has_value(item: HasProviderIds, provider: MetadataProvider | str, value: str | None) -> bool:
    """Store `value` under `provider` on `item`, unless `value` is blank.

    An existing id is overwritten by a present value and left untouched by a
    blank one, so an id can never be erased through this function.

    Returns:
        True if the value was stored.
    """
    name = provider_name(provider)
    if not has_value(value):
        logger.debug("Not setting %s id: no value", name)
        return False

    item.set_provider_id(name, value)
    logger.debug("Set %s id to %r", name, value)
    return True


def set_tvdb_id(item: HasProviderIds, value: str | int | None) -> bool:
    """Store a TVDB id on `item`.

    Integers are written in decimal form. Zero, negative numbers and None are
    treated as "no value" (0 means unknown throughout this package) and leave
    the item unchanged.

    Returns:
        True if the value was stored.
    """
    if isinstance(value, bool):
        value = None
    elif isinstance(value, int):
        value = str(value) if value > 0 else None
    return set_provider_id_if_has_value(item, MetadataProvider.TVDB, value)
