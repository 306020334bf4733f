"""Factory de dependências do fluxo de MassPay."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.paypal import create_paypal_http_client
from api.payload_builders.paypal import MassPayPayloadBuilder
from app.use_cases.paypal import SendMassPayUseCase

if TYPE_CHECKING:
    from config.settings import PayPalSettings


def create_send_mass_pay_use_case(
    settings: PayPalSettings | None = None,
) -> SendMassPayUseCase:
    """Cria SendMassPayUseCase com builder e cliente NVP reais.

    Args:
        settings: PayPalSettings opcional. Se None, carrega do ambiente.

    Raises:
        PayPalConfigurationError: Se as settings forem inválidas.
    """
    return SendMassPayUseCase(
        builder=MassPayPayloadBuilder(),
        client=create_paypal_http_client(settings),
    )
