"""Configuration module for Luna.

Usage:
    from luna.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.helius_cluster)

Note:
    Use `get_settings()` to get the cached instance at runtime so that
    environment overrides set before first use are honoured.
"""

from luna.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
