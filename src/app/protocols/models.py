"""Contratos canônicos de interação e resposta do Discord.

Interaction e InteractionResponse são uniões marcadas pelo campo `type`
do protocolo de interações. Campos opcionais ausentes não são
serializados.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Limite de caracteres do campo `content` de uma mensagem
MESSAGE_CONTENT_MAX_LENGTH = 2000


class InteractionType(IntEnum):
    """Tipos de interação recebidos do Discord."""

    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class InteractionResponseType(IntEnum):
    """Tipos de callback aceitos como resposta a uma interação."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5


class MessageFlags(IntEnum):
    """Flags de mensagem relevantes para respostas de comando."""

    EPHEMERAL = 1 << 6


# ──────────────────────────────────────────────────────────────────────────────
# Interações (entrada)
# ──────────────────────────────────────────────────────────────────────────────


class _InteractionBase(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str | None = None
    application_id: str | None = None
    token: str | None = None
    version: int | None = None
    guild_id: str | None = None
    channel_id: str | None = None
    member: dict[str, Any] | None = None
    user: dict[str, Any] | None = None
    locale: str | None = None


class PingInteraction(_InteractionBase):
    """Health-check de autenticidade enviado pelo Discord."""

    type: Literal[1] = 1

    @property
    def kind(self) -> str:
        return "ping"


class CommandOption(BaseModel):
    """Opção (argumento) de um slash command."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    type: int
    value: str | int | float | bool | None = None
    focused: bool | None = None
    options: list[CommandOption] | None = None


class ApplicationCommandData(BaseModel):
    """Dados do comando invocado."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    id: str | None = None
    type: int | None = None
    guild_id: str | None = None
    target_id: str | None = None
    options: list[CommandOption] | None = None
    resolved: dict[str, Any] | None = None


class ApplicationCommandInteraction(_InteractionBase):
    """Invocação de um slash command."""

    type: Literal[2] = 2
    data: ApplicationCommandData

    @property
    def kind(self) -> str:
        return "application_command"

    @property
    def command_name(self) -> str:
        return self.data.name


class OtherInteraction(_InteractionBase):
    """Interação de tipo conhecido, mas sem tratamento neste endpoint."""

    type: int
    data: dict[str, Any] | None = None

    @property
    def kind(self) -> str:
        return InteractionType(self.type).name.lower()


Interaction = PingInteraction | ApplicationCommandInteraction | OtherInteraction


# ──────────────────────────────────────────────────────────────────────────────
# Respostas (saída)
# ──────────────────────────────────────────────────────────────────────────────


class AllowedMentions(BaseModel):
    """Controle de menções permitidas na resposta."""

    model_config = ConfigDict(frozen=True)

    parse: list[Literal["roles", "users", "everyone"]] = Field(default_factory=list)
    roles: list[str] | None = None
    users: list[str] | None = None
    replied_user: bool | None = None


class InteractionCallbackData(BaseModel):
    """Corpo de uma mensagem de resposta."""

    model_config = ConfigDict(frozen=True)

    content: str | None = Field(default=None, max_length=MESSAGE_CONTENT_MAX_LENGTH)
    tts: bool | None = None
    flags: int | None = None
    allowed_mentions: AllowedMentions | None = None
    embeds: list[dict[str, Any]] | None = None


class PongResponse(BaseModel):
    """Resposta fixa a um Ping."""

    model_config = ConfigDict(frozen=True)

    type: Literal[1] = 1


class ChannelMessageResponse(BaseModel):
    """Resposta síncrona com mensagem no canal de origem."""

    model_config = ConfigDict(frozen=True)

    type: Literal[4] = 4
    data: InteractionCallbackData


class DeferredChannelMessageResponse(BaseModel):
    """ACK imediato; a mensagem final é enviada depois via follow-up."""

    model_config = ConfigDict(frozen=True)

    type: Literal[5] = 5
    data: InteractionCallbackData | None = None


InteractionResponse = PongResponse | ChannelMessageResponse | DeferredChannelMessageResponse


def message_response(
    content: str,
    *,
    ephemeral: bool = False,
    allowed_mentions: AllowedMentions | None = None,
) -> ChannelMessageResponse:
    """Atalho para montar uma resposta de mensagem simples."""
    return ChannelMessageResponse(
        data=InteractionCallbackData(
            content=content,
            flags=int(MessageFlags.EPHEMERAL) if ephemeral else None,
            allowed_mentions=allowed_mentions,
        )
    )
