"""Configuração do pytest para o endpoint de interações."""

import sys
from pathlib import Path

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

TEST_TIMESTAMP = "1700000000"


@pytest.fixture
def private_key() -> Ed25519PrivateKey:
    """Chave privada efêmera que faz o papel do Discord nos testes."""
    return Ed25519PrivateKey.generate()


@pytest.fixture
def public_key_hex(private_key: Ed25519PrivateKey) -> str:
    return private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw).hex()


@pytest.fixture
def sign_headers(private_key: Ed25519PrivateKey):
    """Gera headers de assinatura válidos para `timestamp + body`."""

    def _sign(body: bytes, timestamp: str = TEST_TIMESTAMP) -> dict[str, str]:
        signature = private_key.sign(timestamp.encode("utf-8") + body)
        return {
            "x-signature-timestamp": timestamp,
            "x-signature-ed25519": signature.hex(),
        }

    return _sign


@pytest.fixture(scope="session", autouse=True)
def _test_logging() -> None:
    """Logging JSON em DEBUG, igual ao do serviço, para toda a suíte."""
    from app.bootstrap import initialize_test_app

    initialize_test_app()
