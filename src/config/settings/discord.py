"""Settings específicas de Discord.

Configurações do endpoint de interações (slash commands) do Discord.
A chave pública da aplicação é lida uma única vez no startup e nunca
alterada depois disso.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

# Constantes do protocolo de interações
PUBLIC_KEY_HEX_LENGTH: int = 64
DEFAULT_WEBHOOK_PATH: str = "/"
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 3030

_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        public_key: Chave pública Ed25519 da aplicação (hex, 32 bytes)
        application_id: ID da aplicação Discord (informativo)
        webhook_path: Path exato aceito pelo endpoint
        host: Host de escuta do servidor HTTP
        port: Porta de escuta do servidor HTTP
        body_read_timeout_seconds: Deadline para leitura do body
        handler_timeout_seconds: Deadline para execução do handler
        log_raw_body: Loga o body bruto após verificação (apenas debug)
    """

    # Credenciais
    public_key: str = ""
    application_id: str = ""

    # Endpoint
    webhook_path: str = DEFAULT_WEBHOOK_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    # Timeouts
    body_read_timeout_seconds: float = 5.0
    handler_timeout_seconds: float = 2.5

    # Instrumentação opcional (pode conter conteúdo de usuário)
    log_raw_body: bool = False

    @property
    def listen_address(self) -> str:
        """Endereço de escuta no formato host:port."""
        return f"{self.host}:{self.port}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Discord.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.public_key:
            errors.append("DISCORD_PUBLIC_KEY não configurado")
        elif len(self.public_key) != PUBLIC_KEY_HEX_LENGTH or not _HEX_RE.match(
            self.public_key
        ):
            errors.append(
                f"DISCORD_PUBLIC_KEY deve ter {PUBLIC_KEY_HEX_LENGTH} caracteres hex"
            )

        if not self.webhook_path.startswith("/"):
            errors.append("DISCORD_WEBHOOK_PATH deve começar com '/'")

        if not 0 < self.port < 65536:
            errors.append("PORT deve estar entre 1 e 65535")

        if self.body_read_timeout_seconds <= 0:
            errors.append("DISCORD_BODY_READ_TIMEOUT_SECONDS deve ser > 0")

        if self.handler_timeout_seconds <= 0:
            errors.append("DISCORD_HANDLER_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings a partir de variáveis de ambiente."""
    return DiscordSettings(
        public_key=os.getenv("DISCORD_PUBLIC_KEY", "").strip(),
        application_id=os.getenv("DISCORD_APPLICATION_ID", ""),
        webhook_path=os.getenv("DISCORD_WEBHOOK_PATH", DEFAULT_WEBHOOK_PATH),
        host=os.getenv("HOST", DEFAULT_HOST),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        body_read_timeout_seconds=float(
            os.getenv("DISCORD_BODY_READ_TIMEOUT_SECONDS", "5")
        ),
        handler_timeout_seconds=float(
            os.getenv("DISCORD_HANDLER_TIMEOUT_SECONDS", "2.5")
        ),
        log_raw_body=os.getenv("DISCORD_LOG_RAW_BODY", "").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
