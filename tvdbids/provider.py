"""Metadata providers and their canonical names.

Provider identity is always compared by canonical name. Every operation that
accepts a `MetadataProvider` converts it with `provider_name()` at its
boundary, so enum-keyed and string-keyed access hit the same mapping entries.
"""

from enum import Enum

from tvdbids import plugin


class MetadataProvider(str, Enum):
    """External identifier namespaces known to the host data model.

    The value of each member is its default canonical name, the string used
    as the key in a subject's provider-id mapping.
    """

    TVDB = "Tvdb"
    """TheTVDB series/episode identifier (numeric).

    Its key is the plugin's configured `PROVIDER_ID`, which defaults to the
    member value.
    """

    IMDB = "Imdb"
    """Internet Movie Database identifier (e.g. ``tt0944947``)."""

    ZAP2IT = "Zap2It"
    """Zap2It / Gracenote listings identifier."""


SUPPORTED_PROVIDERS: tuple[MetadataProvider, ...] = (
    MetadataProvider.TVDB,
    MetadataProvider.IMDB,
    MetadataProvider.ZAP2IT,
)
"""Providers whose presence makes a subject resolvable by this plugin."""


def provider_name(provider: MetadataProvider | str) -> str:
    """Return the canonical mapping key for a provider.

    `MetadataProvider.TVDB` resolves to `plugin.PROVIDER_ID`, read at call
    time. Raw strings pass through untouched, so arbitrary provider names
    remain valid keys.
    """
    if provider is MetadataProvider.TVDB:
        return plugin.PROVIDER_ID
    if isinstance(provider, MetadataProvider):
        return provider.value
    return provider
