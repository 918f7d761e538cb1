"""Conector Discord: modelos de interação, assinatura e webhook."""

from .signature import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    PublicKeyError,
    SignatureVerifier,
    load_public_key,
    verify_interaction_signature,
)

__all__ = [
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    "PublicKeyError",
    "SignatureVerifier",
    "load_public_key",
    "verify_interaction_signature",
]
