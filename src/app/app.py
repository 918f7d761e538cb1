"""Entrypoint do endpoint de interações Discord.

Expõe uma factory ASGI (FastAPI). A chave pública é carregada uma vez em
`create_app` e injetada no pipeline via `app.state`.

Uso (produção):
    uvicorn app.app:create_app --factory --host 0.0.0.0 --port 3030

Uso (desenvolvimento):
    slash-webhook
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.discord_factory import create_interaction_use_case
from config.logging import get_logger
from config.settings import get_discord_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from config.settings import DiscordSettings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Loga início e fim do ciclo de vida do processo."""
    logger.info(
        "app_starting",
        extra={"webhook_path": app.state.webhook_path},
    )
    yield
    logger.info("app_shutting_down")


def create_app(settings: DiscordSettings | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        settings: Settings explícitas (testes). Se None, carrega do ambiente,
            inicializa logging e valida a configuração.

    Returns:
        Aplicação FastAPI configurada.
    """
    if settings is None:
        initialize_app()
        validate_runtime_settings()
        settings = get_discord_settings()

    fastapi_app = FastAPI(
        title="slash-webhook",
        description="Endpoint de interações Discord (slash commands)",
        version="1.0.0",
        lifespan=lifespan,
        # Nenhum path além do webhook pode responder
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.state.webhook_path = settings.webhook_path
    fastapi_app.state.interaction_use_case = create_interaction_use_case(settings)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"listen_address": settings.listen_address})

    return fastapi_app


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_discord_settings()
    uvicorn.run(
        "app.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
