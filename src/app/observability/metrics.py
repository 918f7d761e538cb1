"""Registro de métricas via structured logging.

As métricas são emitidas como logs estruturados e agregadas depois
pela plataforma de logs.

Métricas suportadas:
- Latência: tempo de processamento por componente/operação
- Outcome: contador de interações por status HTTP

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("interactions", "process", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "interactions")
        operation: Nome da operação (ex: "process")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_interaction_outcome(
    status_code: int,
    correlation_id: str | None = None,
) -> None:
    """Registra o resultado final de uma interação.

    Args:
        status_code: Status HTTP devolvido ao Discord
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_interaction_outcome",
        extra={
            "metric_type": "counter",
            "component": "interactions",
            "status_code": status_code,
            "correlation_id": correlation_id,
        },
    )
