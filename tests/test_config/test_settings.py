"""Testes das settings (base + Discord)."""

from __future__ import annotations

import pytest

from config.settings import DiscordSettings, get_base_settings, get_discord_settings
from config.settings.base.core import BaseSettings, _parse_environment
from config.settings.discord import DEFAULT_PORT, DEFAULT_WEBHOOK_PATH

VALID_KEY = "ab" * 32


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_discord_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_discord_settings.cache_clear()
    get_base_settings.cache_clear()


class TestDiscordSettings:
    """Testes para DiscordSettings."""

    def test_defaults(self) -> None:
        settings = DiscordSettings(public_key=VALID_KEY)
        assert settings.webhook_path == DEFAULT_WEBHOOK_PATH == "/"
        assert settings.listen_address == f"127.0.0.1:{DEFAULT_PORT}"
        assert settings.log_raw_body is False
        assert settings.validate() == []

    def test_missing_public_key(self) -> None:
        assert DiscordSettings().validate() == ["DISCORD_PUBLIC_KEY não configurado"]

    @pytest.mark.parametrize("key", ["ab" * 31, "zz" * 32, "ab" * 33])
    def test_malformed_public_key(self, key: str) -> None:
        errors = DiscordSettings(public_key=key).validate()
        assert errors == ["DISCORD_PUBLIC_KEY deve ter 64 caracteres hex"]

    def test_invalid_numbers_and_path(self) -> None:
        settings = DiscordSettings(
            public_key=VALID_KEY,
            webhook_path="interactions",
            port=0,
            body_read_timeout_seconds=0,
            handler_timeout_seconds=-1,
        )
        assert len(settings.validate()) == 4

    def test_settings_are_immutable(self) -> None:
        settings = DiscordSettings(public_key=VALID_KEY)
        with pytest.raises(AttributeError):
            settings.public_key = "other"  # type: ignore[misc]

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISCORD_PUBLIC_KEY", f" {VALID_KEY} ")
        monkeypatch.setenv("HOST", "0.0.0.0")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("DISCORD_HANDLER_TIMEOUT_SECONDS", "1.5")
        monkeypatch.setenv("DISCORD_LOG_RAW_BODY", "true")

        settings = get_discord_settings()

        assert settings.public_key == VALID_KEY
        assert settings.listen_address == "0.0.0.0:8080"
        assert settings.handler_timeout_seconds == 1.5
        assert settings.log_raw_body is True
        assert get_discord_settings() is settings


class TestBaseSettings:
    """Testes para BaseSettings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGE", "staging"), ("dev", "development"), ("", "development")],
    )
    def test_parse_environment(self, raw: str, expected: str) -> None:
        assert _parse_environment(raw) == expected

    def test_strict_environments(self) -> None:
        assert BaseSettings(environment="production").is_strict is True
        assert BaseSettings(environment="staging").is_strict is True
        assert BaseSettings().is_strict is False

    def test_empty_service_name_is_invalid(self) -> None:
        assert BaseSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_base_settings()

        assert settings.is_production is True
        assert settings.log_level == "DEBUG"
