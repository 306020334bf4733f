"""Helpers de logging para API NVP do PayPal (sem PII nem credenciais)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import NvpResponse

logger = logging.getLogger(__name__)


def log_nvp_response(method: str, response: NvpResponse) -> None:
    """Loga ACK e correlation id do PayPal, nunca os campos da chamada."""
    extra = {
        "method": method,
        "ack": response.ack,
        "paypal_correlation_id": response.correlation_id,
    }
    if response.is_success:
        logger.debug("Chamada NVP concluída", extra=extra)
    else:
        logger.warning("Chamada NVP sem sucesso", extra=extra)


def log_transport_error(
    method: str,
    endpoint: str,
    status_code: int | None,
) -> None:
    """Loga falha de transporte sem expor dados sensíveis."""
    logger.warning(
        "Falha de transporte na API NVP",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
