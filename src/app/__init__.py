"""App — coração do sistema: orquestração, casos de uso e serviços.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (upload + publicação)
- services/: serviços de aplicação (sessão de upload, polling, post)
- domain/: modelos de domínio, schemas de resposta e erros
- protocols/: contratos/interfaces
- observability/: correlation id dos logs estruturados

Padrão: app executa; api adapta; fsm governa.
"""
