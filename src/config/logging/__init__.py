"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="paypal_masspay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("mass_pay_sent", extra={"recipient_count": 3})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Nunca logar emails, IDs de recebedores, valores ou credenciais.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
