"""Serialização de respostas de interação para o formato do Discord."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from utils.errors import ResponseEncodingError

if TYPE_CHECKING:
    from api.connectors.discord.models import InteractionResponse

JSON_MEDIA_TYPE = "application/json"


def encode_interaction_response(response: InteractionResponse) -> bytes:
    """Serializa InteractionResponse em JSON compacto.

    Campos opcionais não definidos são omitidos, então um Pong vira
    exatamente `{"type":1}`.

    Raises:
        ResponseEncodingError: Se o valor não for uma resposta serializável
    """
    if not isinstance(response, BaseModel):
        raise ResponseEncodingError(f"unsupported_response: {type(response).__name__}")
    try:
        return response.model_dump_json(exclude_none=True).encode("utf-8")
    except (PydanticSerializationError, ValueError, TypeError) as exc:
        raise ResponseEncodingError("response_serialization_failed") from exc
