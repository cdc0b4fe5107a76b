"""
Dynatrace monitoring manifests

Compiles a monitoring configuration into the Namespace, Secret and DynaKube
manifests that deploy Dynatrace into a Kubernetes cluster.
"""

from .models import (
    ActiveGateConfig,
    Capability,
    ContainerResources,
    CpuResources,
    DeploymentTier,
    MemoryResources,
    MonitoringConfig,
    NamespaceMetadata,
    OneAgentConfig,
    Tokens,
)
from .quantities import Cpu, Size
from .create_manifests import create_manifests
from .create_manifests.models import CompilationResult
from .lib.yaml_tools import dump_manifests

__all__ = [
    'ActiveGateConfig',
    'Capability',
    'CompilationResult',
    'ContainerResources',
    'Cpu',
    'CpuResources',
    'DeploymentTier',
    'MemoryResources',
    'MonitoringConfig',
    'NamespaceMetadata',
    'OneAgentConfig',
    'Size',
    'Tokens',
    'create_manifests',
    'dump_manifests',
]
