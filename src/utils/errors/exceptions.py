"""Exceções do pipeline de interações Discord.

Cada erro carrega o status HTTP que o representa externamente. O pipeline
converte toda falha em exatamente uma resposta; nenhuma exceção atravessa
a fronteira HTTP.
"""

from __future__ import annotations


class InteractionWebhookError(Exception):
    """Base para falhas de uma única requisição de interação."""

    status_code: int = 500


class RequestShapeError(InteractionWebhookError):
    """Método, path ou headers fora do contrato do endpoint."""

    def __init__(self, reason: str, status_code: int = 400) -> None:
        super().__init__(reason)
        self.status_code = status_code


class SignatureVerificationError(InteractionWebhookError):
    """Assinatura ausente de validade (mismatch ou hex malformado)."""

    status_code = 403


class InteractionDecodeError(InteractionWebhookError):
    """Payload autêntico, porém malformado ou de formato inesperado."""

    status_code = 400


class CommandHandlerError(InteractionWebhookError):
    """Falha dentro de um handler de comando."""

    status_code = 500

    def __init__(self, command_name: str, reason: str = "handler_failed") -> None:
        super().__init__(f"{reason}: {command_name}")
        self.command_name = command_name


class ResponseEncodingError(InteractionWebhookError):
    """Falha ao serializar a resposta de interação."""

    status_code = 500


class PipelineTimeoutError(InteractionWebhookError):
    """Deadline de leitura do body ou do handler excedido."""

    status_code = 500

    def __init__(self, stage: str) -> None:
        super().__init__(f"timeout: {stage}")
        self.stage = stage


class BodyReadAbortedError(InteractionWebhookError):
    """Cliente desconectou antes do body ser lido por completo."""

    status_code = 400
