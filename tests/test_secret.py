"""
Tests for secret assembly
"""
import pytest

from dynatrace_monitoring import DeploymentTier, Tokens, create_manifests
from dynatrace_monitoring.create_manifests.models import DATA_INGEST_TOKEN_IGNORED_WARNING

from conftest import API_TOKEN, DATA_INGEST_TOKEN, find_manifest


class TestSecret:

    def test_api_token_only(self, make_config):
        result = create_manifests(make_config())
        secret = find_manifest(result.manifests, 'Secret')
        assert secret == {
            'apiVersion': 'v1',
            'kind': 'Secret',
            'metadata': {'name': 'dynatrace-secret', 'namespace': 'dynatrace'},
            'stringData': {'apiToken': API_TOKEN},
            'type': 'Opaque',
        }

    def test_cluster_name_names_the_secret(self, make_config):
        result = create_manifests(make_config(cluster_name='custom-name'))
        assert find_manifest(result.manifests, 'Secret')['metadata']['name'] == 'custom-name'

    def test_tokens_are_not_validated(self, make_config):
        result = create_manifests(make_config(tokens=Tokens(api_token='not a token\t')))
        assert find_manifest(result.manifests, 'Secret')['stringData'] == {'apiToken': 'not a token\t'}

    def test_data_ingest_token_ignored_for_platform(self, make_config):
        result = create_manifests(make_config(
            deployment_tier=DeploymentTier.PLATFORM,
            tokens=Tokens(api_token=API_TOKEN, data_ingest_token=DATA_INGEST_TOKEN),
        ))
        secret = find_manifest(result.manifests, 'Secret')
        assert 'dataIngestToken' not in secret['stringData']
        assert result.warnings == [DATA_INGEST_TOKEN_IGNORED_WARNING]

    @pytest.mark.parametrize('tier', [DeploymentTier.APPLICATION, DeploymentTier.FULL_STACK])
    def test_data_ingest_token_kept_for_advanced_tiers(self, make_config, tier):
        result = create_manifests(make_config(
            deployment_tier=tier,
            tokens=Tokens(api_token=API_TOKEN, data_ingest_token=DATA_INGEST_TOKEN),
        ))
        secret = find_manifest(result.manifests, 'Secret')
        assert secret['stringData']['dataIngestToken'] == DATA_INGEST_TOKEN
        assert result.warnings == []

    @pytest.mark.parametrize('tier', list(DeploymentTier))
    def test_no_warning_without_data_ingest_token(self, make_config, tier):
        result = create_manifests(make_config(deployment_tier=tier))
        assert result.warnings == []
