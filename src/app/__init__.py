"""App: orquestração, casos de uso e contratos.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (inputs/outputs, IO via protocolos)
- domain/: modelos de domínio (MassPayRequest)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs
- constants/: constantes e enums do PayPal

Padrão: app executa; api adapta; config configura; utils apoia.
"""
