"""Modelos da API NVP do PayPal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.constants.paypal import SUCCESS_ACKS

if TYPE_CHECKING:
    from config.settings import PayPalSettings


@dataclass(frozen=True)
class NvpCredentials:
    """Credenciais de assinatura enviadas em toda chamada NVP."""

    username: str
    password: str = field(repr=False)
    signature: str = field(repr=False)
    version: str

    @classmethod
    def from_settings(cls, settings: PayPalSettings) -> NvpCredentials:
        return cls(
            username=settings.api_username,
            password=settings.api_password,
            signature=settings.api_signature,
            version=settings.api_version,
        )

    def as_fields(self) -> dict[str, str]:
        """Campos NVP de autenticação."""
        return {
            "USER": self.username,
            "PWD": self.password,
            "SIGNATURE": self.signature,
            "VERSION": self.version,
        }


@dataclass(frozen=True)
class NvpResponse:
    """Resposta decodificada da API NVP.

    O ACK é reportado como veio; códigos de erro ficam em ``fields``
    (``L_ERRORCODE0``, ``L_LONGMESSAGE0``, ...) sem interpretação.
    """

    ack: str
    correlation_id: str = ""
    timestamp: str = ""
    fields: dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        """True se ACK é Success ou SuccessWithWarning."""
        return self.ack in SUCCESS_ACKS

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> NvpResponse:
        return cls(
            ack=fields.get("ACK", ""),
            correlation_id=fields.get("CORRELATIONID", ""),
            timestamp=fields.get("TIMESTAMP", ""),
            fields=dict(fields),
        )
