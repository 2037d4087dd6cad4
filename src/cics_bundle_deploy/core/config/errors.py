# src/cics_bundle_deploy/core/config/errors.py
"""
Exceções canônicas da camada de arquivos de configuração.

Este módulo define a hierarquia de exceções levantadas durante o
carregamento e o merge de documentos de configuração (config do pipeline
e profile stores).

Invariantes:
    - Todas as exceções herdam de `ConfigFileError`
    - Nenhuma exceção representa erro de deploy ou de execução de Step

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de Engine, Pipeline ou do dispatcher
"""


class ConfigFileError(Exception):
    """
    Exceção base para erros estruturais de documentos de configuração.

    Permite captura genérica de falhas de load/merge, distinta das falhas
    semânticas de resolução de servidor (`core.exceptions.ConfigError`).
    """


class ConfigFileNotFoundError(ConfigFileError):
    """
    Arquivo de configuração obrigatório não encontrado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Um profile store declarado explicitamente também é obrigatório
    """


class UnsupportedConfigFormatError(ConfigFileError):
    """
    Formato de arquivo não suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigFileError):
    """O conteúdo raiz do documento não é um dicionário (`dict`)."""


class ConfigTypeConflictError(ConfigFileError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"steps": {"deploy.bundle": {"region": "R1"}}}
        - override: {"steps": "deploy.bundle"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidProfileStoreError(ConfigFileError):
    """
    Estrutura do profile store inválida.

    Levantada quando a seção `profiles` não é um mapa de perfis ou quando
    um perfil declara campos de credencial com tipo não textual.
    """
