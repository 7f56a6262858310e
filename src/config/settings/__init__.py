"""Agregador de settings do publicador de mídia.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.twitter import (
    DEFAULT_CHUNK_SIZE_BYTES,
    DEFAULT_MEDIA_CATEGORY,
    DEFAULT_POST_TEXT,
    TWITTER_API_BASE_URL,
    TWITTER_UPLOAD_URL,
    TwitterSettings,
    get_twitter_settings,
)

__all__ = [
    # Constants
    "DEFAULT_CHUNK_SIZE_BYTES",
    "DEFAULT_MEDIA_CATEGORY",
    "DEFAULT_POST_TEXT",
    "TWITTER_API_BASE_URL",
    "TWITTER_UPLOAD_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "TwitterSettings",
    "get_base_settings",
    "get_twitter_settings",
]
