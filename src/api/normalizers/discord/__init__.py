"""Normalizer Discord — decodificação de interações autenticadas."""

from .extractor import decode_interaction

__all__ = ["decode_interaction"]
