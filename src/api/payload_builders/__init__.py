"""Payload builders por provedor: construção de payloads para APIs externas.

Estrutura:
- paypal/: API NVP do PayPal (MassPay)

Cada provedor tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
