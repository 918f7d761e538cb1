"""Protocolos e contratos do core da aplicação."""

from .interactions import (
    CommandHandlerProtocol,
    InteractionDecoderProtocol,
    RequestDecision,
    RequestValidatorProtocol,
    ResponseEncoderProtocol,
    SignatureVerifierProtocol,
)
from .models import (
    ApplicationCommandInteraction,
    ChannelMessageResponse,
    DeferredChannelMessageResponse,
    Interaction,
    InteractionResponse,
    OtherInteraction,
    PingInteraction,
    PongResponse,
)

__all__ = [
    "ApplicationCommandInteraction",
    "ChannelMessageResponse",
    "CommandHandlerProtocol",
    "DeferredChannelMessageResponse",
    "Interaction",
    "InteractionDecoderProtocol",
    "InteractionResponse",
    "OtherInteraction",
    "PingInteraction",
    "PongResponse",
    "RequestDecision",
    "RequestValidatorProtocol",
    "ResponseEncoderProtocol",
    "SignatureVerifierProtocol",
]
