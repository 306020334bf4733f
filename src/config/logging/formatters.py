"""Formatter JSON com os campos obrigatórios de log."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios, na ordem em que aparecem no JSON
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,000",
            "level": "INFO",
            "logger": "app.use_cases.paypal.send_mass_pay",
            "message": "mass_pay_sent",
            "correlation_id": "abc-123",
            "service": "paypal_masspay",
            "recipient_count": 3
        }
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )
