"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from api.connectors.paypal.models import NvpResponse


class PayPalNvpClientProtocol(Protocol):
    """Contrato mínimo para cliente HTTP da API NVP do PayPal."""

    async def call(self, fields: Mapping[str, Any]) -> NvpResponse: ...

    async def aclose(self) -> None: ...
