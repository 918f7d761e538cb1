"""Rotas HTTP da API — adapters de entrada por canal.

Responsabilidades:
- Adaptar o request HTTP para o pipeline de interações
- Converter o InteractionReply em resposta HTTP

Estrutura por canal:
- routes/discord/: endpoint de interações

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
