"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    MassPayArityError,
    PayPalConfigurationError,
    PayPalError,
    PayPalTransportError,
)

__all__ = [
    "MassPayArityError",
    "PayPalConfigurationError",
    "PayPalError",
    "PayPalTransportError",
]
