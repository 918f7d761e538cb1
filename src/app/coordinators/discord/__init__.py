"""Coordenação de comandos Discord."""

from .command_router import CommandRouter, create_default_command_router

__all__ = ["CommandRouter", "create_default_command_router"]
