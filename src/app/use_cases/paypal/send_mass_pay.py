"""Use case para envio de MassPay ao PayPal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from app.constants.paypal import MASS_PAY_METHOD
from utils.errors import MassPayArityError, PayPalTransportError

if TYPE_CHECKING:
    from app.domain.mass_pay import MassPayRequest
    from app.protocols.http_client import PayPalNvpClientProtocol
    from app.protocols.payload_builder import PayloadBuilderProtocol

logger = logging.getLogger(__name__)


class MassPayResult(BaseModel):
    """Resultado de um envio de MassPay."""

    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., description="True se o PayPal aceitou a chamada.")
    recipient_count: int = Field(default=0, ge=0, description="Nº de recebedores enviados.")
    ack: str | None = Field(default=None, description="ACK retornado pelo PayPal, sem interpretação.")
    correlation_id: str | None = Field(default=None, description="CORRELATIONID do PayPal.")
    error_code: str | None = Field(default=None, description="Código de erro local.")
    error_message: str | None = Field(default=None, description="Mensagem de erro (sem PII).")


class SendMassPayUseCase:
    """Orquestra build e envio do MassPay."""

    def __init__(
        self,
        builder: PayloadBuilderProtocol,
        client: PayPalNvpClientProtocol,
    ) -> None:
        self._builder = builder
        self._client = client

    async def aclose(self) -> None:
        """Libera o cliente NVP (pool de conexões HTTP)."""
        await self._client.aclose()

    async def __aenter__(self) -> SendMassPayUseCase:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def execute(self, request: MassPayRequest) -> MassPayResult:
        """Executa envio com tratamento de erro.

        Erros de aridade e de transporte viram resultado sem sucesso;
        um ACK diferente de Success/SuccessWithWarning é reportado como veio.
        """
        try:
            fields = self._builder.build(request)
        except MassPayArityError as exc:
            return MassPayResult(
                success=False,
                error_code="ARITY_MISMATCH",
                error_message=str(exc),
            )

        try:
            response = await self._client.call(fields)
        except PayPalTransportError as exc:
            return MassPayResult(
                success=False,
                recipient_count=request.recipient_count,
                error_code="TRANSPORT_ERROR",
                error_message=str(exc),
            )

        logger.info(
            "mass_pay_sent",
            extra={
                "method": MASS_PAY_METHOD,
                "recipient_count": request.recipient_count,
                "ack": response.ack,
            },
        )

        if response.is_success:
            return MassPayResult(
                success=True,
                recipient_count=request.recipient_count,
                ack=response.ack,
                correlation_id=response.correlation_id,
            )
        return MassPayResult(
            success=False,
            recipient_count=request.recipient_count,
            ack=response.ack,
            correlation_id=response.correlation_id,
            error_code="PROVIDER_REJECTED",
            error_message=f"PayPal ACK: {response.ack}",
        )
