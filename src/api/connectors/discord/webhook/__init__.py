"""Webhook Discord: pré-condições de transporte antes da assinatura."""

from .validate import get_header, validate_interaction_request

__all__ = [
    "get_header",
    "validate_interaction_request",
]
