# tests/conftest.py
"""
Fixtures compartilhados para testes do CICS Bundle Deploy.

Este módulo define fixtures reutilizáveis que fornecem:
- um profile store em memória com perfis determinísticos
- uma operação de deploy falsa que registra as chamadas recebidas
- contexto de execução controlado (RunContext)
- Steps dummy para testes do Engine

Decisões arquiteturais:
    - Colaboradores externos (lookup, decrypt, deploy) são substituídos
      por fakes explícitos, nunca por patches globais
    - Dados retornados são determinísticos e isolados

Invariantes:
    - Nenhuma fixture realiza chamada de rede
    - Nenhuma fixture executa pipeline real
"""

import pytest
from datetime import datetime, timezone


class RecordingDeployer:
    """Operação de deploy falsa: registra chamadas e opcionalmente falha."""

    def __init__(self, error=None, outcome=None):
        self.calls = []
        self.error = error
        self.outcome = outcome

    def __call__(self, endpoint_url, bundle, bunddef, csdgroup, cicsplex, region, username, password):
        self.calls.append(
            {
                "endpoint_url": endpoint_url,
                "bundle": bundle,
                "bunddef": bunddef,
                "csdgroup": csdgroup,
                "cicsplex": cicsplex,
                "region": region,
                "username": username,
                "password": password,
            }
        )
        if self.error is not None:
            raise self.error
        return self.outcome


class RecordingLookup:
    """Lookup de perfis sobre um ProfileStore que registra os ids consultados."""

    def __init__(self, store):
        self.store = store
        self.calls = []

    def __call__(self, profile_id):
        self.calls.append(profile_id)
        return self.store.lookup(profile_id)


@pytest.fixture
def profiles_mapping() -> dict:
    """
    Conteúdo de um profile store com três perfis:

    - prod: url + cicsplex, sem region (cenário de override de region)
    - full: todos os campos de servidor e credenciais completas
    - creds_only: apenas credenciais, sem bloco configuration
    """
    return {
        "profiles": {
            "prod": {
                "username": "alice",
                "password": "s3cret",
                "configuration": {"url": "https://h/a", "cicsplex": "PLXA"},
            },
            "full": {
                "username": "bob",
                "password": "pw",
                "private_key": "/home/bob/.ssh/id_rsa",
                "passphrase": "pp",
                "configuration": {
                    "url": "https://cics.example.com:9443",
                    "cicsplex": "PLEX1",
                    "region": "REGION1",
                },
            },
            "creds_only": {"username": "carol", "password": "pw2"},
        }
    }


@pytest.fixture
def profile_store(profiles_mapping):
    from cics_bundle_deploy.profiles.store import ProfileStore

    return ProfileStore.from_mapping(profiles_mapping)


@pytest.fixture
def lookup(profile_store):
    return RecordingLookup(profile_store)


@pytest.fixture
def deployer():
    return RecordingDeployer()


@pytest.fixture
def make_deployer():
    return RecordingDeployer


@pytest.fixture
def run_ctx():
    """
    RunContext isolado, com config mínima para o Step deploy.bundle.

    Os testes ajustam `ctx.config["steps"]["deploy.bundle"]` e publicam
    artefatos do projeto conforme o cenário.
    """
    from cics_bundle_deploy.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config={
            "engine": {"fail_fast": True},
            "steps": {
                "deploy.bundle": {
                    "bunddef": "MYBUNDLE",
                    "csdgroup": "MYGROUP",
                }
            },
        },
        meta={"source": "pytest"},
    )


@pytest.fixture
def DummyStep():
    """
    Classe de Step mínima e duck-typed para testes do Engine.

    `fail=True` faz `run` levantar RuntimeError.
    """
    from cics_bundle_deploy.core.pipeline.types import StepKind, StepStatus, StepResult

    class _DummyStep:
        def __init__(self, step_id="package.bundle", kind=StepKind.PACKAGE, depends_on=None, fail=False):
            self.id = step_id
            self.kind = kind
            self.depends_on = depends_on or []
            self.fail = fail
            self.runs = 0

        def run(self, ctx):
            self.runs += 1
            if self.fail:
                raise RuntimeError(f"{self.id} exploded")
            ctx.set_artifact(f"{self.id}.ok", True)
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary="dummy ok",
            )

    return _DummyStep
