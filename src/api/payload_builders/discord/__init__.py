"""Builders de resposta Discord."""

from .response import JSON_MEDIA_TYPE, encode_interaction_response

__all__ = ["JSON_MEDIA_TYPE", "encode_interaction_response"]
