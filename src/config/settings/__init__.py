"""Agregador de settings do serviço.

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
from config.settings.discord import (
    DEFAULT_WEBHOOK_PATH,
    PUBLIC_KEY_HEX_LENGTH,
    DiscordSettings,
    get_discord_settings,
)

__all__ = [
    # Constants
    "DEFAULT_WEBHOOK_PATH",
    "PUBLIC_KEY_HEX_LENGTH",
    # Base
    "BaseSettings",
    # Channels
    "DiscordSettings",
    "Environment",
    "get_base_settings",
    "get_discord_settings",
]
