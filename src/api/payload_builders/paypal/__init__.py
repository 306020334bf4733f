"""Builders de payload para a API NVP do PayPal."""

from api.payload_builders.paypal.factory import get_payload_builder
from api.payload_builders.paypal.mass_pay import (
    MassPayPayloadBuilder,
    build_mass_pay_fields,
)

__all__ = [
    "MassPayPayloadBuilder",
    "build_mass_pay_fields",
    "get_payload_builder",
]
