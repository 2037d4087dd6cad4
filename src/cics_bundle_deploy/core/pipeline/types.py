# src/cics_bundle_deploy/core/pipeline/types.py
"""
Tipos canônicos do pipeline de deploy.

Componentes principais:
    - StepStatus → enum de estados finais (SUCCESS, SKIPPED, FAILED)
    - StepKind   → enum de classificação semântica de Steps
    - StepResult → estrutura imutável de resultado de execução

Invariantes:
    - Enums possuem valores textuais canônicos
    - StepResult é imutável e seguro contra mutação acidental
    - Tipos não dependem de engine ou do dispatcher
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class StepKind(str, Enum):
    """
    Tipos semânticos de Steps no pipeline.

    Tipos definidos:
        - DIAGNOSTIC: inspeções e validações
        - PACKAGE: produção de artefatos publicáveis
        - DEPLOY: publicação de artefatos em um ambiente remoto

    Decisões arquiteturais:
        - O tipo é puramente informativo
        - O Engine não utiliza `StepKind` para decidir execução
    """
    DIAGNOSTIC = "diagnostic"
    PACKAGE = "package"
    DEPLOY = "deploy"


class StepStatus(str, Enum):
    """
    Estados finais possíveis da execução de um Step.

    Estados definidos:
        - SUCCESS: execução concluída com sucesso
        - SKIPPED: execução pulada por decisão explícita (config ou dependência)
        - FAILED: execução interrompida por erro
    """
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """
    Resultado imutável da execução de um Step.

    Campos:
        - step_id: identificador único do Step
        - kind: tipo semântico do Step
        - status: estado final da execução do Step
        - summary: resumo textual da execução
        - metrics: métricas numéricas produzidas pelo Step
        - warnings: avisos não fatais gerados durante a execução
        - artifacts: referências a artefatos produzidos (paths, hashes)
        - payload: dados adicionais (ex.: registro do deploy, erro canônico)
    """
    step_id: str
    kind: StepKind
    status: StepStatus
    summary: str
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    artifacts: Dict[str, Any] = field(default_factory=dict)
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def error(self) -> Dict[str, Any] | None:
        """Payload canônico de erro, quando a execução falhou."""
        return self.payload.get("error")
