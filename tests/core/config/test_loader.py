# tests/core/config/test_loader.py
"""
Testes do carregador de configuração (load_document / load_config).

Os testes asseguram que:
- o arquivo defaults é obrigatório
- o arquivo local é opcional e, quando presente, tem precedência
- formatos não suportados e raízes não-dict são rejeitados
- YAML e JSON produzem a mesma estrutura

Invariantes:
    - A configuração final é sempre um dicionário
    - Nenhuma configuração parcial é retornada em caso de erro
"""

import json
from pathlib import Path

import pytest

from cics_bundle_deploy.core.config.loader import load_config, load_document
from cics_bundle_deploy.core.config.errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)

DEFAULTS_YAML = """\
engine:
  fail_fast: true
steps:
  deploy.bundle:
    enabled: true
    bunddef: MYBUNDLE
    csdgroup: MYGROUP
    serverId: prod
"""

LOCAL_YAML = """\
steps:
  deploy.bundle:
    region: LOCALREG
    bundle: target/local.zip
"""


def test_missing_defaults_raises(tmp_path: Path):
    with pytest.raises(ConfigFileNotFoundError):
        load_config(defaults_path=tmp_path / "defaults.yaml")


def test_load_defaults_only(tmp_path: Path):
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=None)

    assert out["engine"]["fail_fast"] is True
    assert out["steps"]["deploy.bundle"]["serverId"] == "prod"


def test_missing_local_is_ok(tmp_path: Path):
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")

    out = load_config(defaults_path=defaults, local_path=tmp_path / "local.yaml")

    assert "region" not in out["steps"]["deploy.bundle"]


def test_load_defaults_and_local(tmp_path: Path):
    """
    O arquivo local é mesclado sobre os defaults, preservando chaves não sobrescritas.
    """
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")
    local.write_text(LOCAL_YAML, encoding="utf-8")

    out = load_config(defaults_path=defaults, local_path=local)
    section = out["steps"]["deploy.bundle"]

    assert section["region"] == "LOCALREG"
    assert section["bundle"] == "target/local.zip"
    assert section["bunddef"] == "MYBUNDLE"
    assert section["serverId"] == "prod"


def test_json_document(tmp_path: Path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps({"profiles": {"prod": {"username": "alice"}}}), encoding="utf-8")

    assert load_document(path) == {"profiles": {"prod": {"username": "alice"}}}


def test_empty_document_is_empty_dict(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_document(path) == {}


def test_invalid_root_type_raises(tmp_path: Path):
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")

    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=defaults)


def test_unsupported_extension_raises(tmp_path: Path):
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("a = 1\n", encoding="utf-8")

    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=defaults)
