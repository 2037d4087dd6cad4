# src/cics_bundle_deploy/core/__init__.py
"""
Core do CICS Bundle Deploy.

Componentes principais:
    - config     → carregamento, merge e hashing de configuração
    - pipeline   → protocolo de Step, contexto de execução e tipos de resultado
    - engine     → execução sequencial fail-fast de Steps
    - errors     → payload canônico e serializável de erro
    - exceptions → hierarquia tipada de exceções do deploy

Limites explícitos:
    - Não implementa o protocolo remoto de deploy
    - Não decripta segredos de perfis
"""
