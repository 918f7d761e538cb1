"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- discord/: decodificação de interações (slash commands)

Cada canal tem seu próprio extractor, mantendo SRP.
"""

from .discord import decode_interaction

__all__ = ["decode_interaction"]
