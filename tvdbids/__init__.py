"""
TVDB provider ids - identifier helpers for metadata plugins

This package answers three questions about a subject (a series-level item or
an episode): does it carry an id for a given provider, what is that id, and
how to write a new id without erasing an existing one.

- Provider enum and canonical names
- Item (direct) and episode (derived) subject models
- Lookup result type and presence rule
- Check, get and set helpers
"""

from tvdbids.errors import ProviderIdError, ProviderIdFormatError, ProviderIdOverflowError
from tvdbids.lookup import NOT_FOUND, ProviderIdLookup, has_value
from tvdbids.plugin import PROVIDER_ID
from tvdbids.provider import SUPPORTED_PROVIDERS, MetadataProvider, provider_name
from tvdbids.provider_ids import (
    get_tvdb_id,
    has_provider_id,
    has_tvdb_id,
    is_supported,
    lookup_provider_id,
    lookup_tvdb_id,
    parse_invariant_int,
    set_provider_id_if_has_value,
    set_tvdb_id,
)
from tvdbids.subject import EpisodeInfo, HasProviderIds, HasSeriesProviderIds, ItemInfo

__all__ = [
    "EpisodeInfo",
    "HasProviderIds",
    "HasSeriesProviderIds",
    "ItemInfo",
    "MetadataProvider",
    "NOT_FOUND",
    "PROVIDER_ID",
    "ProviderIdError",
    "ProviderIdFormatError",
    "ProviderIdLookup",
    "ProviderIdOverflowError",
    "SUPPORTED_PROVIDERS",
    "get_tvdb_id",
    "has_provider_id",
    "has_tvdb_id",
    "has_value",
    "is_supported",
    "lookup_provider_id",
    "lookup_tvdb_id",
    "parse_invariant_int",
    "provider_name",
    "set_provider_id_if_has_value",
    "set_tvdb_id",
]

__version__ = "0.1.0"
