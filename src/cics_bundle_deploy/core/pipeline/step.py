# src/cics_bundle_deploy/core/pipeline/step.py
"""
Contrato canônico de Step.

Um Step é a menor unidade executável do pipeline: executa sua lógica,
interage exclusivamente via RunContext e produz um StepResult imutável.
Conformidade é garantida por duck typing (@runtime_checkable).

Invariantes:
    - Cada Step possui um `id` único
    - Cada Step declara explicitamente suas dependências
    - O método `run` é chamado no máximo uma vez por execução
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable, List

from .context import RunContext
from .types import StepKind, StepResult


@runtime_checkable
class Step(Protocol):
    """
    Contrato canônico de um Step.

    Atributos obrigatórios:
        - id: identificador único e estável do Step
        - kind: classificação semântica do Step (`StepKind`)
        - depends_on: lista de `id` dos Steps dos quais depende

    Limites explícitos:
        - Não define lógica de retry
        - Não decide políticas de execução (fail-fast, skip)
    """
    id: str
    kind: StepKind
    depends_on: List[str]

    def run(self, ctx: RunContext) -> StepResult:
        """Executa a etapa uma única vez usando exclusivamente o RunContext."""
        ...
