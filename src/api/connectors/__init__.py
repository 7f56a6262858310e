"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- twitter/: Twitter/X (upload chunked v1.1 + API v2)

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
