"""Codificação e decodificação do formato NVP (name-value pair).

Request: campos em maiúsculas, codificados como formulário
(``METHOD=MassPay&L_EMAIL0=...``). Response: mesmo formato, URL-encoded.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl

if TYPE_CHECKING:
    from collections.abc import Mapping

    from api.connectors.paypal.models import NvpCredentials

# Campos cujo nome NVP não é o nome do builder em maiúsculas
_WIRE_NAMES: dict[str, str] = {
    "currency_code": "CURRENCYCODE",
    "email_subject": "EMAILSUBJECT",
}


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        # repr de float pode virar notação científica
        return format(Decimal(str(value)), "f")
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def encode_nvp_request(
    fields: Mapping[str, Any],
    credentials: NvpCredentials,
) -> dict[str, str]:
    """Converte campos de operação no corpo NVP da requisição.

    Args:
        fields: Campos produzidos por um payload builder
        credentials: Credenciais de assinatura

    Returns:
        Campos NVP (chaves em maiúsculas, valores string). `currency_code` e
        `email_subject` viram `CURRENCYCODE` e `EMAILSUBJECT`. Campos com valor
        None são omitidos. Credenciais sobrescrevem campos homônimos.
    """
    encoded = {
        _WIRE_NAMES.get(key, key.upper()): _format_value(value)
        for key, value in fields.items()
        if value is not None
    }
    encoded.update(credentials.as_fields())
    return encoded


def decode_nvp_response(body: str) -> dict[str, str]:
    """Decodifica corpo NVP da resposta (``ACK=Success&CORRELATIONID=...``).

    Args:
        body: Texto da resposta HTTP

    Returns:
        Dict campo → valor (URL-decoded). Corpo vazio retorna dict vazio.
    """
    return dict(parse_qsl(body.strip(), keep_blank_values=True))
