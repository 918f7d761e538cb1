"""Decodificação de payloads de interação do Discord.

Recebe apenas bytes já autenticados e produz a variante de Interaction
correspondente ao campo `type`.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from api.connectors.discord.models import (
    ApplicationCommandInteraction,
    Interaction,
    InteractionType,
    OtherInteraction,
    PingInteraction,
)
from utils.errors import InteractionDecodeError

_MODELS_BY_TYPE: dict[int, type[PingInteraction | ApplicationCommandInteraction]] = {
    InteractionType.PING: PingInteraction,
    InteractionType.APPLICATION_COMMAND: ApplicationCommandInteraction,
}


def _load_json_object(raw_body: bytes) -> dict[str, Any]:
    # ValueError cobre JSONDecodeError, UnicodeDecodeError e inteiros longos demais
    try:
        payload = json.loads(raw_body)
    except (ValueError, RecursionError) as exc:
        raise InteractionDecodeError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InteractionDecodeError("payload_not_object")
    return payload


def _interaction_type(payload: dict[str, Any]) -> InteractionType:
    raw_type = payload.get("type")
    # bool é subclasse de int e não é um tipo válido
    if not isinstance(raw_type, int) or isinstance(raw_type, bool):
        raise InteractionDecodeError("missing_interaction_type")
    try:
        return InteractionType(raw_type)
    except ValueError as exc:
        raise InteractionDecodeError(f"unknown_interaction_type: {raw_type}") from exc


def decode_interaction(raw_body: bytes) -> Interaction:
    """Decodifica body autenticado em uma Interaction.

    Args:
        raw_body: Body bruto, já com assinatura verificada

    Raises:
        InteractionDecodeError: JSON inválido, payload que não é objeto,
            `type` ausente/desconhecido ou formato que não valida

    Returns:
        PingInteraction, ApplicationCommandInteraction ou OtherInteraction
    """
    payload = _load_json_object(raw_body)
    interaction_type = _interaction_type(payload)
    model = _MODELS_BY_TYPE.get(interaction_type, OtherInteraction)

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise InteractionDecodeError(
            f"invalid_interaction_shape: {interaction_type.name.lower()}"
        ) from exc
