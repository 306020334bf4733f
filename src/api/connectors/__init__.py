"""Connectors por provedor: adapters de borda para APIs externas.

Estrutura:
- paypal/: API NVP do PayPal

Cada provedor tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
