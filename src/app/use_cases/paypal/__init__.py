"""Use cases de pagamentos via PayPal."""

from .send_mass_pay import MassPayResult, SendMassPayUseCase

__all__ = ["MassPayResult", "SendMassPayUseCase"]
