from enum import Enum
from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt

from .quantities import Cpu, Size

class DeploymentTier(Enum):
    # cluster infrastructure metrics only
    PLATFORM = 'platform'
    # adds application level observability
    APPLICATION = 'application'
    # adds host level agent injection
    FULL_STACK = 'full-stack'

class Capability(Enum):
    DYNATRACE_API = 'dynatrace-api'
    METRICS_INGEST = 'metrics-ingest'

class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

# Resource specifications
class CpuResources(FrozenModel):
    request: Cpu | str | StrictInt | StrictFloat | None = None
    limit: Cpu | str | StrictInt | StrictFloat | None = None

class MemoryResources(FrozenModel):
    request: Size | str | StrictInt | StrictFloat | None = None
    limit: Size | str | StrictInt | StrictFloat | None = None

class ContainerResources(FrozenModel):
    cpu: CpuResources | None = None
    memory: MemoryResources | None = None

class ActiveGateConfig(FrozenModel):
    # kubernetes-monitoring and routing are added by the compiler
    capabilities: list[Capability] | None = None
    resources: ContainerResources | None = None

class OneAgentConfig(FrozenModel):
    # only honored for the full-stack tier
    resources: ContainerResources | None = None

class Tokens(FrozenModel):
    api_token: str
    data_ingest_token: str | None = None

class NamespaceMetadata(FrozenModel):
    labels: dict[str, str] = {}
    annotations: dict[str, str] = {}

# Root monitoring definition
class MonitoringConfig(FrozenModel):
    api_url: str
    deployment_tier: DeploymentTier
    tokens: Tokens

    # names both the secret and the dynakube when set
    cluster_name: str | None = None
    namespace_name: str | None = None
    namespace_metadata: NamespaceMetadata | None = None
    skip_namespace_creation: bool = False
    skip_cert_check: bool | None = None
    host_group: str | None = None

    active_gate: ActiveGateConfig | None = None
    one_agent: OneAgentConfig | None = None


def validate_monitoring_yaml(monitoring_yaml: dict) -> MonitoringConfig:
    return MonitoringConfig.model_validate(monitoring_yaml)
