"""Formatters de logging estruturado (JSON via python-json-logger)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19T10:30:00",
            "level": "INFO",
            "logger": "app.use_cases.discord.process_interaction",
            "message": "interaction_dispatched",
            "correlation_id": "abc-123",
            "service": "slash_webhook"
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
