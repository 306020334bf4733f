"""Conector PayPal - adapter de borda para a API NVP.

Este módulo é o único ponto de IO com o PayPal.
Responsabilidades:
- HTTP client para o endpoint NVP
- Codificação/decodificação NVP
- Modelos de credenciais e resposta
"""

from .http_client import PayPalNvpHttpClient, create_paypal_http_client
from .models import NvpCredentials, NvpResponse
from .nvp import decode_nvp_response, encode_nvp_request

__all__ = [
    "NvpCredentials",
    "NvpResponse",
    "PayPalNvpHttpClient",
    "create_paypal_http_client",
    "decode_nvp_response",
    "encode_nvp_request",
]
