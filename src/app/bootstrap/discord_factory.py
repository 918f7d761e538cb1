"""Factory de wiring para Discord (bootstrap).

Conecta as implementações da camada api/ (validator, assinatura,
decoder, encoder) aos protocolos esperados pelo use case.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.discord.signature import SignatureVerifier
from api.connectors.discord.webhook import validate_interaction_request
from api.normalizers.discord import decode_interaction
from api.payload_builders.discord import encode_interaction_response
from app.coordinators.discord import CommandRouter, create_default_command_router
from app.use_cases.discord import ProcessInteractionUseCase

if TYPE_CHECKING:
    from config.settings import DiscordSettings


def create_signature_verifier(settings: DiscordSettings) -> SignatureVerifier:
    """Carrega a chave pública uma única vez.

    Raises:
        PublicKeyError: Se DISCORD_PUBLIC_KEY for inválida
    """
    return SignatureVerifier.from_hex(settings.public_key)


def create_interaction_use_case(
    settings: DiscordSettings,
    command_router: CommandRouter | None = None,
    verifier: SignatureVerifier | None = None,
) -> ProcessInteractionUseCase:
    """Cria o pipeline de interações com dependências injetadas."""
    return ProcessInteractionUseCase(
        validator=validate_interaction_request,
        verifier=verifier or create_signature_verifier(settings),
        decoder=decode_interaction,
        encoder=encode_interaction_response,
        command_router=command_router or create_default_command_router(),
        webhook_path=settings.webhook_path,
        body_read_timeout_seconds=settings.body_read_timeout_seconds,
        handler_timeout_seconds=settings.handler_timeout_seconds,
        log_raw_body=settings.log_raw_body,
    )
