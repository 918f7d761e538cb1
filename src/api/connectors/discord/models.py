"""Reexports de modelos de protocolo para api/connectors.

Os contratos canônicos residem em app/protocols/models.py.
Este módulo expõe os tipos para consumidores na camada api/.
"""

from __future__ import annotations

from app.protocols.models import (
    MESSAGE_CONTENT_MAX_LENGTH,
    AllowedMentions,
    ApplicationCommandData,
    ApplicationCommandInteraction,
    ChannelMessageResponse,
    CommandOption,
    DeferredChannelMessageResponse,
    Interaction,
    InteractionCallbackData,
    InteractionResponse,
    InteractionResponseType,
    InteractionType,
    MessageFlags,
    OtherInteraction,
    PingInteraction,
    PongResponse,
    message_response,
)

__all__ = [
    "MESSAGE_CONTENT_MAX_LENGTH",
    "AllowedMentions",
    "ApplicationCommandData",
    "ApplicationCommandInteraction",
    "ChannelMessageResponse",
    "CommandOption",
    "DeferredChannelMessageResponse",
    "Interaction",
    "InteractionCallbackData",
    "InteractionResponse",
    "InteractionResponseType",
    "InteractionType",
    "MessageFlags",
    "OtherInteraction",
    "PingInteraction",
    "PongResponse",
    "message_response",
]
