"""Pré-condições de transporte do webhook de interações.

Checagens feitas antes de qualquer leitura de body, sempre nesta ordem:
método, path, presença dos headers de assinatura e decodificação da
assinatura. A ordem é fixa para que o status devolvido a quem sonda o
endpoint não revele qual checagem posterior falharia.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.interactions import RequestDecision

from ..signature import SIGNATURE_HEADER, TIMESTAMP_HEADER, decode_signature_header

if TYPE_CHECKING:
    from collections.abc import Mapping

HTTP_BAD_REQUEST = 400
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_METHOD_NOT_ALLOWED = 405


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Busca header sem diferenciar maiúsculas/minúsculas."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def validate_interaction_request(
    method: str,
    path: str,
    headers: Mapping[str, str],
    webhook_path: str = "/",
) -> RequestDecision:
    """Decide se a requisição pode seguir para verificação de assinatura.

    Args:
        method: Método HTTP
        path: Path da URL (sem query string)
        headers: Headers recebidos
        webhook_path: Path configurado do endpoint

    Returns:
        RequestDecision com timestamp e assinatura decodificada quando
        `proceed` é True. Header de assinatura malformado é rejeitado com
        403, igual a uma assinatura incorreta.
    """
    if method.upper() != "POST":
        return RequestDecision.reject(HTTP_METHOD_NOT_ALLOWED, "method_not_allowed")

    if path != webhook_path:
        return RequestDecision.reject(HTTP_NOT_FOUND, "not_found")

    timestamp = get_header(headers, TIMESTAMP_HEADER)
    signature_hex = get_header(headers, SIGNATURE_HEADER)
    if timestamp is None or signature_hex is None:
        return RequestDecision.reject(HTTP_BAD_REQUEST, "missing_signature_headers")

    signature = decode_signature_header(signature_hex)
    if signature is None:
        return RequestDecision.reject(HTTP_FORBIDDEN, "invalid_signature")

    return RequestDecision(
        proceed=True,
        # Headers HTTP chegam decodificados em latin-1; recupera os bytes originais
        timestamp=timestamp.encode("latin-1"),
        signature=signature,
    )
