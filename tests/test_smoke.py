# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do CICS Bundle Deploy.

Garantem apenas que o pacote é importável e que a API pública de topo
está exposta. Não validam comportamento de deploy.

Limites explícitos:
    - Não testar lógica de negócio
    - Não acumular asserts funcionais
"""


def test_smoke():
    """O pacote importa sem falhas estruturais e expõe a API de topo."""
    import cics_bundle_deploy

    assert callable(cics_bundle_deploy.deploy_bundle)
    assert cics_bundle_deploy.DeployParameters is not None
