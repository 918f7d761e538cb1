"""Testes do roteamento de comandos por nome."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from app.coordinators.discord import CommandRouter, create_default_command_router
from app.protocols.models import (
    ApplicationCommandData,
    ApplicationCommandInteraction,
    message_response,
)
from utils.errors import CommandHandlerError


def _command(name: str) -> ApplicationCommandInteraction:
    return ApplicationCommandInteraction(data=ApplicationCommandData(name=name))


def _router() -> tuple[CommandRouter, AsyncMock, AsyncMock]:
    ping = AsyncMock(return_value=message_response("ping"))
    fallback = AsyncMock(return_value=message_response("fallback"))
    return CommandRouter(handlers={"ping": ping}, default_handler=fallback), ping, fallback


@pytest.mark.asyncio
async def test_dispatch_exact_match() -> None:
    router, ping, fallback = _router()
    interaction = _command("ping")

    response = await router.dispatch("ping", interaction)

    assert response.data.content == "ping"
    ping.assert_awaited_once_with(interaction)
    fallback.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["Ping", "PING", "ping ", "", "unknown-xyz"])
async def test_unmatched_names_fall_back_to_default(name: str) -> None:
    router, ping, fallback = _router()

    response = await router.dispatch(name, _command(name))

    assert response.data.content == "fallback"
    ping.assert_not_awaited()
    fallback.assert_awaited_once()


@pytest.mark.asyncio
async def test_handler_failure_is_wrapped() -> None:
    broken = AsyncMock(side_effect=RuntimeError("boom"))
    router = CommandRouter(handlers={"broken": broken}, default_handler=broken)

    with pytest.raises(CommandHandlerError) as exc_info:
        await router.dispatch("broken", _command("broken"))

    assert exc_info.value.command_name == "broken"
    assert exc_info.value.status_code == 500
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_mapping_is_copied_and_read_only() -> None:
    handlers = {"a": AsyncMock()}
    router = CommandRouter(handlers=handlers, default_handler=AsyncMock())
    handlers["b"] = AsyncMock()

    assert router.command_names == frozenset({"a"})


@pytest.mark.asyncio
async def test_default_router_commands() -> None:
    router = create_default_command_router()

    assert router.command_names == frozenset({"vroom", "debug"})
    vroom_reply = await router.dispatch("vroom", _command("vroom"))
    assert vroom_reply.data.content == "Vroom vroom"
    unknown_reply = await router.dispatch("unknown-xyz", _command("unknown-xyz"))
    assert "unknown-xyz" in (unknown_reply.data.content or "")
