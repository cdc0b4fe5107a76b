from ..models import *
from .models import DEFAULT_NAMESPACE, DEFAULT_SECRET_NAME, DEFAULT_DYNA_KUBE_NAME, ADVANCED_DEPLOYMENT_TIERS, Diagnostics, ManifestArguments

def is_advanced_deployment(config: MonitoringConfig) -> bool:
    return config.deployment_tier in ADVANCED_DEPLOYMENT_TIERS

def get_namespace_name(config: MonitoringConfig) -> str:
    if config.namespace_name is not None:
        return config.namespace_name
    return DEFAULT_NAMESPACE

def get_resource_name(config: MonitoringConfig, default: str) -> str:
    if config.cluster_name is not None:
        return config.cluster_name
    return default

def create_manifest_arguments(config: MonitoringConfig, diagnostics: Diagnostics) -> ManifestArguments:
    if not isinstance(config.deployment_tier, DeploymentTier):
        raise ValueError(f'Unsupported deployment tier: {config.deployment_tier}')

    return ManifestArguments(
        config=config,
        namespace_name=get_namespace_name(config),
        secret_name=get_resource_name(config, DEFAULT_SECRET_NAME),
        dyna_kube_name=get_resource_name(config, DEFAULT_DYNA_KUBE_NAME),
        diagnostics=diagnostics
    )
