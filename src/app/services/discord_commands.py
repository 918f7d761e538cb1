"""Handlers dos slash commands registrados.

Handlers são funções assíncronas puras: recebem a interação e devolvem
a resposta, sem efeitos colaterais.
"""

from __future__ import annotations

from app.protocols.models import (
    MESSAGE_CONTENT_MAX_LENGTH,
    ApplicationCommandInteraction,
    InteractionResponse,
    message_response,
)

VROOM_REPLY = "Vroom vroom"

_CODE_BLOCK_OPEN = "```python\n"
_CODE_BLOCK_CLOSE = "\n```"
_TRUNCATION_MARK = "…"


async def vroom(interaction: ApplicationCommandInteraction) -> InteractionResponse:
    """Responde sempre com o texto fixo do comando /vroom."""
    _ = interaction
    return message_response(VROOM_REPLY)


async def debug(interaction: ApplicationCommandInteraction) -> InteractionResponse:
    """Ecoa a representação da interação em um bloco de código.

    Também é o handler padrão para comandos sem correspondência.
    """
    return message_response(render_debug_block(repr(interaction)))


def render_debug_block(text: str) -> str:
    """Monta bloco de código respeitando o limite de tamanho da mensagem."""
    budget = MESSAGE_CONTENT_MAX_LENGTH - len(_CODE_BLOCK_OPEN) - len(_CODE_BLOCK_CLOSE)
    if len(text) > budget:
        text = text[: budget - len(_TRUNCATION_MARK)] + _TRUNCATION_MARK
    return f"{_CODE_BLOCK_OPEN}{text}{_CODE_BLOCK_CLOSE}"
