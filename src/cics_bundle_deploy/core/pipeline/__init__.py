# src/cics_bundle_deploy/core/pipeline/__init__.py
"""
# Pipeline Core

Contratos e estruturas que compõem um pipeline de build/deploy.

## Componentes

- **types**: `StepStatus`, `StepKind`, `StepResult`
- **step**: `Step` (Protocol), contrato mínimo de um Step
- **context**: `RunContext`, contexto de execução (artefatos, logs, warnings)

## Princípios Fundamentais

- Steps **não conhecem** o Engine
- Dependências são **explícitas e declarativas**
- Comunicação entre Steps ocorre **apenas via RunContext**
"""

from .context import RunContext
from .step import Step
from .types import StepKind, StepResult, StepStatus

__all__ = ["RunContext", "Step", "StepKind", "StepResult", "StepStatus"]
