"""Agregador de rotas — registra os routers por canal.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.discord.router import router as discord_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Discord: catch-all na raiz, precisa ser o único router
    api_router.include_router(discord_router, tags=["discord"])

    return api_router
