from dataclasses import dataclass, field
from ..models import *
from typing import Any

DEFAULT_NAMESPACE = 'dynatrace'
DEFAULT_SECRET_NAME = 'dynatrace-secret'
DEFAULT_DYNA_KUBE_NAME = 'dynakube'

DEFAULT_ACTIVE_GATE_CPU_REQUEST = '500m'
DEFAULT_ACTIVE_GATE_CPU_LIMIT = '1000m'
DEFAULT_ACTIVE_GATE_MEMORY_REQUEST = '512Mi'
DEFAULT_ACTIVE_GATE_MEMORY_LIMIT = '1.5Gi'

ACTIVE_GATE_RESOURCE_DEFAULTS = {
    'requests': {
        'cpu': DEFAULT_ACTIVE_GATE_CPU_REQUEST,
        'memory': DEFAULT_ACTIVE_GATE_MEMORY_REQUEST,
    },
    'limits': {
        'cpu': DEFAULT_ACTIVE_GATE_CPU_LIMIT,
        'memory': DEFAULT_ACTIVE_GATE_MEMORY_LIMIT,
    },
}

DYNA_KUBE_API_VERSION = 'dynatrace.com/v1beta3'
DYNA_KUBE_KIND = 'DynaKube'

K8S_APP_ENABLED_ANNOTATION = 'feature.dynatrace.com/k8s-app-enabled'
INJECTION_READONLY_VOLUME_ANNOTATION = 'feature.dynatrace.com/injection-readonly-volume'

KUBERNETES_MONITORING_CAPABILITY = 'kubernetes-monitoring'
ROUTING_CAPABILITY = 'routing'

ADVANCED_DEPLOYMENT_TIERS = frozenset([
    DeploymentTier.APPLICATION,
    DeploymentTier.FULL_STACK,
])

NAMESPACE_METADATA_IGNORED_WARNING = 'WARNING: Namespace creation is skipped. Custom namespace metadata will not be applied.'
DATA_INGEST_TOKEN_IGNORED_WARNING = 'WARNING: Data ingest token is not supported for platform monitoring. It will be ignored.'
ONE_AGENT_RESOURCES_IGNORED_WARNING = 'WARNING: OneAgent resources are only applicable for FULL_STACK deployment option. They will be ignored.'

@dataclass
class Diagnostics:
    warnings: list[str] = field(default_factory=list)

    def warn(self, message: str):
        self.warnings.append(message)

@dataclass(frozen=True)
class ManifestArguments:
    config: MonitoringConfig
    namespace_name: str
    secret_name: str
    dyna_kube_name: str
    diagnostics: Diagnostics

@dataclass
class CompilationResult:
    manifests: list[dict[str, Any]]
    warnings: list[str] = field(default_factory=list)
