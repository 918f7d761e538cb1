"""Use case do endpoint de interações: verifica e depois despacha.

Fluxo por requisição:
1. Pré-condições de transporte (método → path → headers), sem ler body
2. Leitura do body (com deadline)
3. Verificação Ed25519 de `timestamp + body`
4. Decodificação da interação
5. Ping → Pong; ApplicationCommand → CommandRouter
6. Serialização da resposta

Toda falha vira exatamente um InteractionReply. Nenhuma resposta de
interação é produzida para uma requisição com assinatura inválida.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.observability import get_correlation_id, record_interaction_outcome, record_latency
from app.protocols.models import (
    ApplicationCommandInteraction,
    PingInteraction,
    PongResponse,
)
from utils.errors import (
    CommandHandlerError,
    InteractionDecodeError,
    InteractionWebhookError,
    PipelineTimeoutError,
    RequestShapeError,
    SignatureVerificationError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from app.coordinators.discord.command_router import CommandRouter
    from app.protocols.interactions import (
        InteractionDecoderProtocol,
        RequestValidatorProtocol,
        ResponseEncoderProtocol,
        SignatureVerifierProtocol,
    )
    from app.protocols.models import InteractionResponse

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_INTERNAL_SERVER_ERROR = 500


@dataclass(frozen=True, slots=True)
class InteractionRequest:
    """Requisição crua, independente do servidor HTTP.

    `read_body` é chamado no máximo uma vez, e só depois das
    pré-condições de transporte passarem.
    """

    method: str
    path: str
    headers: Mapping[str, str]
    read_body: Callable[[], Awaitable[bytes]]


@dataclass(frozen=True, slots=True)
class InteractionReply:
    """Resposta HTTP final do pipeline."""

    status_code: int
    body: bytes = b""
    media_type: str | None = None


class ProcessInteractionUseCase:
    """Pipeline verify-then-dispatch, sem estado entre requisições."""

    def __init__(
        self,
        *,
        validator: RequestValidatorProtocol,
        verifier: SignatureVerifierProtocol,
        decoder: InteractionDecoderProtocol,
        encoder: ResponseEncoderProtocol,
        command_router: CommandRouter,
        webhook_path: str = "/",
        body_read_timeout_seconds: float = 5.0,
        handler_timeout_seconds: float = 2.5,
        log_raw_body: bool = False,
    ) -> None:
        self._validator = validator
        self._verifier = verifier
        self._decoder = decoder
        self._encoder = encoder
        self._command_router = command_router
        self._webhook_path = webhook_path
        self._body_read_timeout_seconds = body_read_timeout_seconds
        self._handler_timeout_seconds = handler_timeout_seconds
        self._log_raw_body = log_raw_body
        # Novos tipos de interação entram aqui, sem tocar validator/verifier
        self._kind_handlers: dict[
            type, Callable[[Any], Awaitable[InteractionResponse]]
        ] = {
            PingInteraction: self._answer_ping,
            ApplicationCommandInteraction: self._dispatch_command,
        }

    async def execute(self, request: InteractionRequest) -> InteractionReply:
        """Processa uma requisição e devolve a resposta HTTP."""
        started_at = time.perf_counter()
        try:
            reply = await self._process(request)
        except CommandHandlerError as exc:
            logger.exception(
                "command_handler_failed",
                extra={"command": exc.command_name, "correlation_id": get_correlation_id()},
            )
            reply = InteractionReply(status_code=exc.status_code)
        except InteractionWebhookError as exc:
            extra = {
                "error_type": type(exc).__name__,
                "error": str(exc),
                "status_code": exc.status_code,
                "correlation_id": get_correlation_id(),
            }
            if exc.status_code < HTTP_INTERNAL_SERVER_ERROR:
                logger.info("interaction_rejected", extra=extra)
            else:
                logger.warning("interaction_failed", extra=extra)
            reply = InteractionReply(status_code=exc.status_code)
        except Exception:
            logger.exception(
                "interaction_unexpected_error",
                extra={"correlation_id": get_correlation_id()},
            )
            reply = InteractionReply(status_code=HTTP_INTERNAL_SERVER_ERROR)

        latency_ms = (time.perf_counter() - started_at) * 1000
        record_latency("interactions", "process", latency_ms, get_correlation_id())
        record_interaction_outcome(reply.status_code, correlation_id=get_correlation_id())
        return reply

    async def _process(self, request: InteractionRequest) -> InteractionReply:
        decision = self._validator(
            request.method,
            request.path,
            request.headers,
            self._webhook_path,
        )
        if not decision.proceed:
            reason = decision.reason or "rejected"
            if decision.status_code == SignatureVerificationError.status_code:
                raise SignatureVerificationError(reason)
            raise RequestShapeError(reason, decision.status_code or HTTP_BAD_REQUEST)

        raw_body = await self._read_body(request)

        if not self._verifier.verify(decision.timestamp, raw_body, decision.signature):
            logger.info(
                "interaction_signature_invalid",
                extra={"body_size": len(raw_body), "correlation_id": get_correlation_id()},
            )
            raise SignatureVerificationError("invalid_signature")

        if self._log_raw_body:
            logger.debug(
                "interaction_raw_body",
                extra={"raw_body": raw_body.decode("utf-8", errors="replace")},
            )

        interaction = self._decoder(raw_body)
        handler = self._kind_handlers.get(type(interaction))
        if handler is None:
            raise InteractionDecodeError(f"unsupported_interaction_kind: {interaction.kind}")

        response = await handler(interaction)
        body = self._encoder(response)

        logger.info(
            "interaction_dispatched",
            extra={
                "interaction_kind": interaction.kind,
                "response_type": response.type,
                "correlation_id": get_correlation_id(),
            },
        )
        return InteractionReply(status_code=HTTP_OK, body=body, media_type=JSON_MEDIA_TYPE)

    async def _read_body(self, request: InteractionRequest) -> bytes:
        try:
            return await asyncio.wait_for(
                request.read_body(),
                timeout=self._body_read_timeout_seconds,
            )
        except TimeoutError as exc:
            raise PipelineTimeoutError("body_read") from exc

    async def _answer_ping(self, interaction: PingInteraction) -> InteractionResponse:
        _ = interaction
        return PongResponse()

    async def _dispatch_command(
        self, interaction: ApplicationCommandInteraction
    ) -> InteractionResponse:
        name = interaction.command_name
        try:
            return await asyncio.wait_for(
                self._command_router.dispatch(name, interaction),
                timeout=self._handler_timeout_seconds,
            )
        except TimeoutError as exc:
            raise PipelineTimeoutError(f"handler:{name}") from exc
