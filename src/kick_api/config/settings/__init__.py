"""Settings do cliente Kick."""

from __future__ import annotations

from kick_api.config.settings.kick import KickSettings, get_kick_settings

__all__ = [
    "KickSettings",
    "get_kick_settings",
]
