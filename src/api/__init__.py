"""API: camada de borda e adapters de provedores.

Responsabilidades:
- Construir payloads para APIs externas
- Codificar, enviar e decodificar chamadas HTTP

Subpastas:
- payload_builders/: construção de payloads por operação
- connectors/: adapters HTTP por provedor

NÃO PODE conter: orquestração de use cases.
"""
