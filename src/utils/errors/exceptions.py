"""Exceções de domínio para operações na API do PayPal."""

from __future__ import annotations


class PayPalError(Exception):
    """Base para erros levantados por este pacote."""


class MassPayArityError(PayPalError):
    """Listas paralelas do MassPay com tamanhos diferentes do nº de recebedores."""


class PayPalConfigurationError(PayPalError):
    """Credenciais ou ambiente do PayPal ausentes/inválidos."""


class PayPalTransportError(PayPalError):
    """Falha de HTTP/conexão ao chamar a API NVP (sem dados sensíveis)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
