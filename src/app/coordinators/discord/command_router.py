"""Roteamento de slash commands por nome.

Lookup exato (case-sensitive) em um mapeamento estático. Nomes sem
correspondência, inclusive string vazia, caem no handler padrão em vez de
falhar: um comando desconhecido nunca vira erro de roteamento para quem
invocou.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from app.services.discord_commands import debug, vroom
from config.logging import log_fallback
from utils.errors import CommandHandlerError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.interactions import CommandHandlerProtocol
    from app.protocols.models import ApplicationCommandInteraction, InteractionResponse

logger = logging.getLogger(__name__)


class CommandRouter:
    """Mapeia nome de comando → handler, com handler padrão."""

    def __init__(
        self,
        handlers: Mapping[str, CommandHandlerProtocol],
        default_handler: CommandHandlerProtocol,
    ) -> None:
        self._handlers = MappingProxyType(dict(handlers))
        self._default_handler = default_handler

    @property
    def command_names(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def resolve(self, name: str) -> CommandHandlerProtocol:
        """Retorna o handler do comando ou o handler padrão."""
        handler = self._handlers.get(name)
        if handler is None:
            log_fallback(logger, "command_router", reason="unknown_command")
            return self._default_handler
        return handler

    async def dispatch(
        self,
        name: str,
        interaction: ApplicationCommandInteraction,
    ) -> InteractionResponse:
        """Executa o handler do comando.

        Raises:
            CommandHandlerError: Se o handler falhar
        """
        handler = self.resolve(name)
        try:
            return await handler(interaction)
        except CommandHandlerError:
            raise
        except Exception as exc:
            raise CommandHandlerError(name) from exc


def create_default_command_router() -> CommandRouter:
    """Router com os comandos embarcados (/vroom, /debug)."""
    return CommandRouter(
        handlers={
            "vroom": vroom,
            "debug": debug,
        },
        default_handler=debug,
    )
