"""Filters de logging para injeção de contexto e mascaramento.

Campos injetados:
- correlation_id: ID de rastreamento do envio
- service: Nome do serviço (ex: paypal_masspay)

Emails de recebedores e credenciais NVP nunca devem sair nos logs.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable

_EMAIL_PATTERN: Final = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

# Atributos de `extra` que nunca podem aparecer em claro
SECRET_ATTRIBUTES: Final = frozenset(
    {"PWD", "SIGNATURE", "api_password", "api_signature", "password", "signature"}
)

REDACTED = "[REDACTED]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já foi passado via `extra`, preserva o valor.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        # Mascara emails na mensagem já formatada e credenciais em `extra`
        if isinstance(record.msg, str):
            record.msg = _EMAIL_PATTERN.sub("[EMAIL]", record.getMessage())
            record.args = ()
        for attr in SECRET_ATTRIBUTES:
            if hasattr(record, attr):
                setattr(record, attr, REDACTED)
        return True
