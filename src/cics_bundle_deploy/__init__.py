# src/cics_bundle_deploy/__init__.py
"""
CICS Bundle Deploy — publicação de bundles CICS a partir de um pipeline de build.

Um deploy resolve a configuração do servidor a partir de um perfil
armazenado e de overrides explícitos, escolhe o arquivo de bundle,
valida a configuração e despacha uma única chamada remota.

Arquitetura em alto nível:
    - core.config    → carregamento, merge e hashing de configuração
    - core.pipeline  → Step, RunContext e StepResult
    - core.engine    → execução sequencial fail-fast
    - deploy         → resolver, validator, selector e dispatcher
    - profiles       → profile store baseado em arquivo
    - steps.deploy   → Step `deploy.bundle`

Limites explícitos:
    - Não implementa o protocolo remoto de deploy
    - Não implementa decriptação de segredos
    - Não empacota bundles
"""

from .deploy import DeployParameters, deploy_bundle

__all__ = ["DeployParameters", "deploy_bundle"]
