"""Protocolos do pipeline de interações (verify-then-dispatch)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import ApplicationCommandInteraction, Interaction, InteractionResponse


@dataclass(frozen=True, slots=True)
class RequestDecision:
    """Resultado da validação de transporte: prosseguir ou rejeitar."""

    proceed: bool
    status_code: int | None = None
    reason: str | None = None
    timestamp: bytes = b""
    signature: bytes = b""

    @classmethod
    def reject(cls, status_code: int, reason: str) -> RequestDecision:
        return cls(proceed=False, status_code=status_code, reason=reason)


class RequestValidatorProtocol(Protocol):
    """Checa método, path e headers sem ler o body."""

    def __call__(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str],
        webhook_path: str = "/",
    ) -> RequestDecision: ...


class SignatureVerifierProtocol(Protocol):
    """Verifica a assinatura de `timestamp + body`."""

    def verify(self, timestamp: bytes, body: bytes, signature: bytes) -> bool: ...


class InteractionDecoderProtocol(Protocol):
    """Converte bytes autenticados em Interaction."""

    def __call__(self, raw_body: bytes) -> Interaction: ...


class ResponseEncoderProtocol(Protocol):
    """Serializa InteractionResponse para o formato de wire."""

    def __call__(self, response: InteractionResponse) -> bytes: ...


class CommandHandlerProtocol(Protocol):
    """Handler de slash command: sem estado, endereçado pelo nome."""

    async def __call__(
        self, interaction: ApplicationCommandInteraction
    ) -> InteractionResponse: ...
