"""Factory para obter o builder correto por método NVP."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.paypal.mass_pay import MassPayPayloadBuilder
from app.constants.paypal import MASS_PAY_METHOD

if TYPE_CHECKING:
    from app.protocols.payload_builder import PayloadBuilderProtocol

# Mapeamento de método NVP para builder
_BUILDERS: dict[str, PayloadBuilderProtocol] = {
    MASS_PAY_METHOD: MassPayPayloadBuilder(),
}


def get_payload_builder(method: str) -> PayloadBuilderProtocol | None:
    """Retorna o builder para o método NVP.

    Args:
        method: Nome do método (ex: "MassPay")

    Returns:
        Builder apropriado ou None se não suportado
    """
    return _BUILDERS.get(method)
