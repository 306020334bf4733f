"""Enums e constantes de domínio para a API NVP do PayPal."""

from __future__ import annotations

from enum import StrEnum

# Nome da operação NVP de pagamento em massa
MASS_PAY_METHOD = "MassPay"

# Valores de ACK que indicam que o PayPal aceitou a chamada
SUCCESS_ACKS = frozenset({"Success", "SuccessWithWarning"})


class ReceiverType(StrEnum):
    """Forma de identificar os recebedores de um MassPay."""

    USER_ID = "UserID"
    EMAIL_ADDRESS = "EmailAddress"


class PayPalEnvironment(StrEnum):
    """Ambientes da API NVP."""

    SANDBOX = "sandbox"
    LIVE = "live"
