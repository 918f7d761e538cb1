"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_discord_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base_settings = get_base_settings()
    configure_logging(
        level=base_settings.log_level,
        service_name=base_settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    base_settings = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base_settings.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base_settings = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base_settings.validate())
    errors.extend(f"discord: {error}" for error in get_discord_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": base_settings.environment,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base_settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base_settings.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base_settings.environment}:\n{details}")
