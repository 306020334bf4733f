"""Agregador de settings do serviço de pagamentos.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Provider-specific settings
from config.settings.paypal import (
    NVP_API_VERSION,
    NVP_ENDPOINTS,
    PayPalSettings,
    get_paypal_settings,
)

__all__ = [
    # Constants
    "NVP_API_VERSION",
    "NVP_ENDPOINTS",
    # Base
    "BaseSettings",
    "Environment",
    # Providers
    "PayPalSettings",
    "get_base_settings",
    "get_paypal_settings",
]
