"""Payload builders por canal — construção de requisições para APIs externas.

Estrutura:
- twitter/: comandos de mídia (INIT/APPEND/FINALIZE/STATUS), users/me e tweets

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
