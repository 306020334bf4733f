"""Protocolos de construção de payload NVP."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.mass_pay import MassPayRequest


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir os campos de uma chamada NVP."""

    def build(self, request: MassPayRequest) -> dict[str, Any]: ...
