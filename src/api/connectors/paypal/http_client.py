"""Cliente HTTP especializado para a API NVP do PayPal.

Estende HttpClient genérico com comportamentos específicos do PayPal:
- Assinatura das chamadas (USER, PWD, SIGNATURE, VERSION)
- Codificação NVP do request e decodificação da resposta
- Logging estruturado sem PII (credenciais, emails, valores)

Não faz retry, rate limiting nem classificação de códigos de erro do
PayPal: o ACK é devolvido como veio.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.paypal.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.paypal.models import NvpCredentials, NvpResponse
from api.connectors.paypal.nvp import decode_nvp_response, encode_nvp_request
from api.connectors.paypal.paypal_logging import log_nvp_response, log_transport_error
from utils.errors import PayPalConfigurationError, PayPalTransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from config.settings import PayPalSettings

logger: logging.Logger = logging.getLogger(__name__)


class PayPalNvpHttpClient(HttpClient):
    """Cliente HTTP para o endpoint NVP do PayPal."""

    def __init__(
        self,
        endpoint: str,
        credentials: NvpCredentials,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa cliente NVP.

        Args:
            endpoint: URL do endpoint NVP (sandbox ou live)
            credentials: Credenciais de assinatura
            config: Configuração HTTP base
            http_client: Cliente httpx opcional (injeção em testes)
        """
        super().__init__(config, http_client)
        self.endpoint = endpoint
        self._credentials = credentials

    async def call(self, fields: Mapping[str, Any]) -> NvpResponse:
        """Executa uma chamada NVP.

        Args:
            fields: Campos da operação (ex: saída de MassPayPayloadBuilder)

        Returns:
            Resposta NVP decodificada

        Raises:
            PayPalTransportError: Se timeout, falha de conexão ou status HTTP de erro
        """
        method = str(fields.get("method", ""))
        body = encode_nvp_request(fields, self._credentials)

        try:
            response = await self.post_form(self.endpoint, data=body)
        except HttpError as exc:
            log_transport_error(method, self.endpoint, exc.status_code)
            raise PayPalTransportError(str(exc), status_code=exc.status_code) from exc

        nvp_response = NvpResponse.from_fields(decode_nvp_response(response.text))
        log_nvp_response(method, nvp_response)
        return nvp_response


def create_paypal_http_client(
    settings: PayPalSettings | None = None,
) -> PayPalNvpHttpClient:
    """Factory para criar cliente NVP com config padrão.

    Args:
        settings: PayPalSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado para o PayPal.

    Raises:
        PayPalConfigurationError: Se as settings forem inválidas.
    """
    # Import local para evitar dependência circular
    from config.settings import get_paypal_settings

    paypal = settings or get_paypal_settings()
    errors = paypal.validate()
    if errors:
        logger.error("Settings do PayPal inválidas", extra={"error_count": len(errors)})
        raise PayPalConfigurationError("; ".join(errors))

    config = HttpClientConfig(
        timeout_seconds=paypal.request_timeout_seconds,
        verify_ssl=paypal.verify_ssl,
    )
    return PayPalNvpHttpClient(
        endpoint=paypal.nvp_endpoint,
        credentials=NvpCredentials.from_settings(paypal),
        config=config,
    )
