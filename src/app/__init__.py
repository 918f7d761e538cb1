"""App — orquestração do endpoint de interações.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: roteamento de comandos
- use_cases/: pipeline verify-then-dispatch (sem IO direto)
- services/: handlers de comandos
- protocols/: contratos/interfaces e modelos canônicos
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; utils apoia.
"""
