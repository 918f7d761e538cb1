"""Verificação de assinatura Ed25519 das interações do Discord.

O Discord assina `timestamp + body` (bytes concatenados, sem separador)
com a chave privada da aplicação. A chave pública é carregada uma vez no
startup e compartilhada, somente leitura, por todas as requisições.
"""

from __future__ import annotations

import binascii
import logging
from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

logger = logging.getLogger(__name__)

PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64

# Headers de assinatura enviados pelo Discord
TIMESTAMP_HEADER = "x-signature-timestamp"
SIGNATURE_HEADER = "x-signature-ed25519"


class PublicKeyError(ValueError):
    """Chave pública ausente ou malformada."""


def load_public_key(public_key_hex: str) -> Ed25519PublicKey:
    """Carrega a chave pública Ed25519 a partir do hex configurado.

    Args:
        public_key_hex: Chave pública em hex (32 bytes / 64 caracteres)

    Returns:
        Ed25519PublicKey pronta para verificação

    Raises:
        PublicKeyError: Se a chave não for hex válido de 32 bytes
    """
    try:
        raw_key = bytes.fromhex(public_key_hex.strip())
    except ValueError as exc:
        raise PublicKeyError("public_key_not_hex") from exc

    if len(raw_key) != PUBLIC_KEY_LENGTH:
        raise PublicKeyError(f"public_key_length_invalid: {len(raw_key)}")

    try:
        return Ed25519PublicKey.from_public_bytes(raw_key)
    except ValueError as exc:
        raise PublicKeyError("public_key_invalid") from exc


def decode_signature_header(signature_hex: str) -> bytes | None:
    """Decodifica o header de assinatura.

    Returns:
        Assinatura bruta (64 bytes) ou None se o header for malformado
    """
    try:
        signature = binascii.unhexlify(signature_hex.strip())
    except (ValueError, binascii.Error):
        return None
    if len(signature) != SIGNATURE_LENGTH:
        return None
    return signature


def build_signed_message(timestamp: bytes, body: bytes) -> bytes:
    """Reconstrói a mensagem assinada: timestamp seguido do body."""
    return timestamp + body


def verify_interaction_signature(
    public_key: Ed25519PublicKey,
    timestamp: bytes,
    body: bytes,
    signature: bytes,
) -> bool:
    """Verifica a assinatura Ed25519 de uma interação.

    Nunca levanta exceção: qualquer assinatura malformada (tamanho errado,
    ponto não canônico) é tratada como falha de verificação.

    Args:
        public_key: Chave pública da aplicação
        timestamp: Bytes brutos do header x-signature-timestamp
        body: Body bruto da requisição
        signature: Assinatura decodificada do header x-signature-ed25519

    Returns:
        True somente se a assinatura for válida
    """
    if len(signature) != SIGNATURE_LENGTH:
        return False
    try:
        public_key.verify(signature, build_signed_message(timestamp, body))
    except InvalidSignature:
        return False
    except ValueError:
        logger.debug("signature_malformed")
        return False
    return True


@dataclass(frozen=True, slots=True)
class SignatureVerifier:
    """Verificador vinculado à chave pública da aplicação."""

    public_key: Ed25519PublicKey

    @classmethod
    def from_hex(cls, public_key_hex: str) -> SignatureVerifier:
        return cls(public_key=load_public_key(public_key_hex))

    def verify(self, timestamp: bytes, body: bytes, signature: bytes) -> bool:
        return verify_interaction_signature(self.public_key, timestamp, body, signature)
