"""Endpoint de interações do Discord.

Uma única rota catch-all entrega toda requisição ao pipeline, que decide
405/404/400/403 na ordem método → path → headers → assinatura. Assim o
roteamento do framework não antecipa um 404 antes da checagem de método.

Segurança:
- Body só é lido depois das pré-condições de transporte
- Rejeições têm body vazio (nada do payload vaza)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response
from starlette.requests import ClientDisconnect

from app.observability import reset_correlation_id, set_correlation_id
from app.use_cases.discord import InteractionRequest
from utils.errors import BodyReadAbortedError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

router = APIRouter()

ACCEPTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _body_reader(request: Request) -> Callable[[], Awaitable[bytes]]:
    async def _read() -> bytes:
        try:
            return await request.body()
        except ClientDisconnect as exc:
            logger.info("interaction_client_disconnected", extra={"channel": "discord"})
            raise BodyReadAbortedError("client_disconnected") from exc

    return _read


@router.api_route(
    "/{full_path:path}",
    methods=ACCEPTED_METHODS,
    response_model=None,
    include_in_schema=False,
)
async def receive_interaction(request: Request) -> Response:
    """Recebe uma interação e devolve a resposta produzida pelo pipeline.

    Returns:
        200 com JSON da resposta, ou status de rejeição com body vazio.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        use_case = request.app.state.interaction_use_case
        reply = await use_case.execute(
            InteractionRequest(
                method=request.method,
                path=request.url.path,
                headers=request.headers,
                read_body=_body_reader(request),
            )
        )
        return Response(
            content=reply.body,
            status_code=reply.status_code,
            media_type=reply.media_type,
        )
    finally:
        reset_correlation_id(token)
