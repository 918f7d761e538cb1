"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto.
"""

from app.services.discord_commands import VROOM_REPLY, debug, render_debug_block, vroom

__all__ = [
    "VROOM_REPLY",
    "debug",
    "render_debug_block",
    "vroom",
]
