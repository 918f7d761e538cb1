"""Testes do endpoint de interações (adapter FastAPI)."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.discord import webhook
from app.bootstrap.discord_factory import create_interaction_use_case
from app.observability import get_correlation_id
from app.use_cases.discord import InteractionReply
from config.settings import DiscordSettings
from utils.errors import BodyReadAbortedError


def _build_request(
    *,
    method: str,
    path: str = "/",
    body: bytes = b"",
    headers: dict[str, str] | None = None,
    use_case: object,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "server": ("testserver", 80),
        "path": path,
        "raw_path": path.encode("utf-8"),
        "root_path": "",
        "query_string": b"",
        "headers": raw_headers,
        "app": SimpleNamespace(state=SimpleNamespace(interaction_use_case=use_case)),
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.disconnect"}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture
def use_case(public_key_hex: str):
    return create_interaction_use_case(DiscordSettings(public_key=public_key_hex))


@pytest.mark.asyncio
async def test_ping_returns_pong(use_case, sign_headers) -> None:
    body = b'{"type":1}'
    request = _build_request(method="POST", body=body, headers=sign_headers(body), use_case=use_case)

    response = await webhook.receive_interaction(request)

    assert response.status_code == 200
    assert response.body == b'{"type":1}'
    assert response.media_type == "application/json"


@pytest.mark.asyncio
async def test_vroom_returns_message(use_case, sign_headers) -> None:
    body = b'{"type":2,"data":{"name":"vroom"}}'
    request = _build_request(method="POST", body=body, headers=sign_headers(body), use_case=use_case)

    response = await webhook.receive_interaction(request)

    assert response.status_code == 200
    assert json.loads(response.body) == {"type": 4, "data": {"content": "Vroom vroom"}}


@pytest.mark.asyncio
async def test_invalid_signature_returns_empty_forbidden(use_case, sign_headers) -> None:
    body = b'{"type":2,"data":{"name":"vroom"}}'
    request = _build_request(
        method="POST",
        body=body,
        headers=sign_headers(body, timestamp="1700000001") | {"x-signature-timestamp": "1700000002"},
        use_case=use_case,
    )

    response = await webhook.receive_interaction(request)

    assert response.status_code == 403
    assert response.body == b""


@pytest.mark.asyncio
async def test_get_returns_method_not_allowed(use_case) -> None:
    request = _build_request(method="GET", use_case=use_case)

    response = await webhook.receive_interaction(request)

    assert response.status_code == 405
    assert response.body == b""


@pytest.mark.asyncio
async def test_correlation_id_is_scoped_to_request(sign_headers) -> None:
    seen: dict[str, str] = {}

    class _RecordingUseCase:
        async def execute(self, request) -> InteractionReply:
            seen["correlation_id"] = get_correlation_id()
            return InteractionReply(status_code=200, body=b"{}", media_type="application/json")

    request = _build_request(
        method="POST",
        headers={"x-correlation-id": "cid-123"},
        use_case=_RecordingUseCase(),
    )

    await webhook.receive_interaction(request)

    assert seen["correlation_id"] == "cid-123"
    assert get_correlation_id() == ""


@pytest.mark.asyncio
async def test_body_reader_maps_disconnect() -> None:
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/",
        "headers": [],
        "query_string": b"",
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.disconnect"}

    read_body = webhook._body_reader(Request(scope, _receive))

    with pytest.raises(BodyReadAbortedError):
        await read_body()
