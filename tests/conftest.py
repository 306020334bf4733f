"""Configuração do pytest para o projeto paypal-masspay."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import PayPalSettings  # noqa: E402


@pytest.fixture
def paypal_settings() -> PayPalSettings:
    """Settings sandbox com credenciais fictícias."""
    return PayPalSettings(
        api_username="sandbox_api1.example.com",
        api_password="sandbox-pwd",
        api_signature="sandbox-signature",
    )
