"""Use cases do canal Discord."""

from .process_interaction import (
    InteractionReply,
    InteractionRequest,
    ProcessInteractionUseCase,
)

__all__ = [
    "InteractionReply",
    "InteractionRequest",
    "ProcessInteractionUseCase",
]
