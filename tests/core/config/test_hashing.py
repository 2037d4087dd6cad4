# tests/core/config/test_hashing.py
"""
Testes do hashing de configuração.

Os testes asseguram que:
- configurações equivalentes produzem o mesmo hash, independente da ordem
- alterações produzem hashes diferentes
- o algoritmo é SHA-256 do JSON canônico com segredos mascarados
- segredos não influenciam o hash
"""

import hashlib
import json

import pytest

from cics_bundle_deploy.core.config.hashing import REDACTED, compute_config_hash, redact_secrets


def _canonical_json_bytes(obj: dict) -> bytes:
    # referência explícita da política: chaves ordenadas, sem espaços, UTF-8
    s = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def test_hash_is_deterministic():
    a = {"bunddef": "B1", "csdgroup": "G1", "region": "R1"}
    b = {"region": "R1", "csdgroup": "G1", "bunddef": "B1"}

    assert compute_config_hash(a) == compute_config_hash(b)
    assert len(compute_config_hash(a)) == 64


def test_hash_changes_with_config():
    assert compute_config_hash({"region": "R1"}) != compute_config_hash({"region": "R2"})


def test_hash_matches_sha256_of_canonical_json():
    cfg = {"steps": {"deploy.bundle": {"bunddef": "B1", "password": "pw"}}}
    expected_obj = {"steps": {"deploy.bundle": {"bunddef": "B1", "password": REDACTED}}}

    expected = hashlib.sha256(_canonical_json_bytes(expected_obj)).hexdigest()

    assert compute_config_hash(cfg) == expected


def test_secrets_do_not_affect_hash():
    """
    A senha é mascarada antes da serialização: trocar a senha não muda o hash.
    """
    assert compute_config_hash({"username": "u", "password": "a"}) == compute_config_hash(
        {"username": "u", "password": "b"}
    )


def test_redact_secrets_keeps_missing_secrets_as_none():
    out = redact_secrets({"password": None, "nested": [{"passphrase": "x"}]})

    assert out == {"password": None, "nested": [{"passphrase": REDACTED}]}


def test_hash_rejects_non_dict():
    with pytest.raises(TypeError):
        compute_config_hash(["not", "a", "dict"])
