"""Settings específicas do PayPal.

Credenciais e endpoint da API NVP (sandbox ou live).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

from app.constants.paypal import PayPalEnvironment

# Versão da API NVP enviada em todas as chamadas
NVP_API_VERSION: str = "124.0"

NVP_ENDPOINTS: dict[PayPalEnvironment, str] = {
    PayPalEnvironment.SANDBOX: "https://api-3t.sandbox.paypal.com/nvp",
    PayPalEnvironment.LIVE: "https://api-3t.paypal.com/nvp",
}


@dataclass(frozen=True)
class PayPalSettings:
    """Configurações da API NVP do PayPal.

    Attributes:
        api_username: Usuário de API (USER)
        api_password: Senha de API (PWD)
        api_signature: Assinatura de API (SIGNATURE)
        environment: sandbox|live
        api_version: Versão da API NVP (VERSION)
        request_timeout_seconds: Timeout para requisições HTTP
        verify_ssl: Verifica certificado TLS do endpoint
    """

    # Credenciais (nunca logar)
    api_username: str = ""
    api_password: str = field(default="", repr=False)
    api_signature: str = field(default="", repr=False)

    environment: str = PayPalEnvironment.SANDBOX
    api_version: str = NVP_API_VERSION

    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True

    @property
    def is_live(self) -> bool:
        """Retorna True se aponta para o ambiente live."""
        return self.environment == PayPalEnvironment.LIVE

    @property
    def nvp_endpoint(self) -> str:
        """URL do endpoint NVP do ambiente configurado.

        Raises:
            ValueError: Se o ambiente não for sandbox nem live.
        """
        return NVP_ENDPOINTS[PayPalEnvironment(self.environment)]

    def validate(self) -> list[str]:
        """Valida configurações mínimas do PayPal.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_username:
            errors.append("PAYPAL_API_USERNAME não configurado")

        if not self.api_password:
            errors.append("PAYPAL_API_PASSWORD não configurado")

        if not self.api_signature:
            errors.append("PAYPAL_API_SIGNATURE não configurado")

        if self.environment not in tuple(PayPalEnvironment):
            errors.append("PAYPAL_ENVIRONMENT deve ser 'sandbox' ou 'live'")

        if self.request_timeout_seconds <= 0:
            errors.append("PAYPAL_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> PayPalSettings:
    """Carrega PayPalSettings a partir de variáveis de ambiente."""
    return PayPalSettings(
        api_username=os.getenv("PAYPAL_API_USERNAME", ""),
        api_password=os.getenv("PAYPAL_API_PASSWORD", ""),
        api_signature=os.getenv("PAYPAL_API_SIGNATURE", ""),
        environment=os.getenv("PAYPAL_ENVIRONMENT", PayPalEnvironment.SANDBOX).lower(),
        api_version=os.getenv("PAYPAL_API_VERSION", NVP_API_VERSION),
        request_timeout_seconds=float(os.getenv("PAYPAL_REQUEST_TIMEOUT_SECONDS", "30")),
        verify_ssl=os.getenv("PAYPAL_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_paypal_settings() -> PayPalSettings:
    """Retorna instância cacheada de PayPalSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
