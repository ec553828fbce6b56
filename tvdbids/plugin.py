"""Plugin-level constants resolved once at import time."""

from tvdbids.config import load_plugin_config

PLUGIN_CONFIG = load_plugin_config()

PROVIDER_ID: str = PLUGIN_CONFIG.provider_id
"""Canonical name of the plugin's own provider (the TVDB key)."""
