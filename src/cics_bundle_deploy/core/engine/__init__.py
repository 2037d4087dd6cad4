# src/cics_bundle_deploy/core/engine/__init__.py
"""
Engine do pipeline.

O Engine executa Steps na ordem declarada, aplica skip por configuração e
por dependência, e converte falhas em `ErrorPayload`. O host do build
mapeia `RunResult.ok` para o seu próprio exit code.
"""

from .engine import DuplicateStepIdError, Engine, RunResult, UnknownDependencyError

__all__ = ["DuplicateStepIdError", "Engine", "RunResult", "UnknownDependencyError"]
