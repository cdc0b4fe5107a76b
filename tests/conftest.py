"""
Shared fixtures for the manifest compiler tests
"""
import os
import pytest

from dynatrace_monitoring import DeploymentTier, MonitoringConfig, Tokens

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')

API_URL = 'https://ENVIRONMENTID.live.dynatrace.com/api'
API_TOKEN = '*** API TOKEN ***'
DATA_INGEST_TOKEN = '*** DATA INGEST TOKEN ***'


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def make_config():
    """Builds a config from the required properties plus overrides"""
    def fn(**overrides) -> MonitoringConfig:
        props = {
            'api_url': API_URL,
            'deployment_tier': DeploymentTier.PLATFORM,
            'tokens': Tokens(api_token=API_TOKEN),
        }
        props.update(overrides)
        return MonitoringConfig(**props)
    return fn


def find_manifest(manifests, kind):
    matches = [m for m in manifests if m['kind'] == kind]
    assert len(matches) == 1, f"expected exactly one {kind}, found {len(matches)}"
    return matches[0]
