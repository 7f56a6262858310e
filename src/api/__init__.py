"""API — camada de borda e adapters de canais.

Responsabilidades:
- Assinar requisições para APIs externas
- Executar chamadas HTTP e traduzir falhas em erros tipados
- Construir payloads para APIs externas

Subpastas:
- connectors/: adapters HTTP por canal
- payload_builders/: construção de requisições para APIs externas

NÃO PODE conter: FSM, regras de sessão, orquestração de use cases.
"""
