"""Protocolos e contratos do core da aplicação."""

from .http_client import PayPalNvpClientProtocol
from .payload_builder import PayloadBuilderProtocol

__all__ = [
    "PayPalNvpClientProtocol",
    "PayloadBuilderProtocol",
]
