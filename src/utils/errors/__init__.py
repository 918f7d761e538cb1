"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BodyReadAbortedError,
    CommandHandlerError,
    InteractionDecodeError,
    InteractionWebhookError,
    PipelineTimeoutError,
    RequestShapeError,
    ResponseEncodingError,
    SignatureVerificationError,
)

__all__ = [
    "BodyReadAbortedError",
    "CommandHandlerError",
    "InteractionDecodeError",
    "InteractionWebhookError",
    "PipelineTimeoutError",
    "RequestShapeError",
    "ResponseEncodingError",
    "SignatureVerificationError",
]
