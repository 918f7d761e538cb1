"""Testes end-to-end da aplicação FastAPI (TestClient)."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.connectors.discord.signature import PublicKeyError
from app.app import create_app
from config.settings import DiscordSettings


@pytest.fixture
def client(public_key_hex: str) -> TestClient:
    app = create_app(DiscordSettings(public_key=public_key_hex))
    with TestClient(app) as test_client:
        yield test_client


def test_ping_round_trip(client: TestClient, sign_headers) -> None:
    body = b'{"type":1}'

    response = client.post("/", content=body, headers=sign_headers(body))

    assert response.status_code == 200
    assert response.content == b'{"type":1}'
    assert response.headers["content-type"] == "application/json"


def test_vroom(client: TestClient, sign_headers) -> None:
    body = b'{"type":2,"data":{"name":"vroom"}}'

    response = client.post("/", content=body, headers=sign_headers(body))

    assert response.status_code == 200
    assert response.json() == {"type": 4, "data": {"content": "Vroom vroom"}}


def test_unknown_command_is_accepted(client: TestClient, sign_headers) -> None:
    body = b'{"type":2,"data":{"name":"unknown-xyz"}}'

    response = client.post("/", content=body, headers=sign_headers(body))

    assert response.status_code == 200
    assert response.json()["type"] == 4


def test_forged_request_is_forbidden(client: TestClient, sign_headers) -> None:
    body = b'{"type":2,"data":{"name":"vroom"}}'
    headers = sign_headers(body)
    headers["x-signature-ed25519"] = "00" * 64

    response = client.post("/", content=body, headers=headers)

    assert response.status_code == 403
    assert response.content == b""


def test_missing_headers_is_bad_request(client: TestClient) -> None:
    response = client.post("/", content=b'{"type":1}')
    assert response.status_code == 400


@pytest.mark.parametrize(
    ("method", "path", "status"),
    [
        ("GET", "/", 405),
        ("DELETE", "/", 405),
        ("GET", "/docs", 405),
        ("POST", "/docs", 404),
        ("POST", "/openapi.json", 404),
        ("POST", "/health", 404),
    ],
)
def test_other_method_or_path(client: TestClient, method: str, path: str, status: int) -> None:
    response = client.request(method, path)
    assert response.status_code == status


def test_replay_produces_identical_replies(client: TestClient, sign_headers) -> None:
    body = b'{"type":2,"data":{"name":"vroom"}}'
    headers = sign_headers(body)

    first = client.post("/", content=body, headers=headers)
    second = client.post("/", content=body, headers=headers)

    assert first.status_code == second.status_code == 200
    assert first.content == second.content


def test_invalid_public_key_prevents_startup() -> None:
    with pytest.raises(PublicKeyError):
        create_app(DiscordSettings(public_key="ab" * 31))
