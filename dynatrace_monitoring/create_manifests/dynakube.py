from ..models import *
from .models import *
from .defaults import is_advanced_deployment
from .resources import create_resource_requirements
from typing import Any
from kubernetes import client

CONTROL_PLANE_NODE_ROLES = [
    'node-role.kubernetes.io/master',
    'node-role.kubernetes.io/control-plane',
]

def get_capabilities(config: MonitoringConfig) -> list[str]:
    capabilities = { KUBERNETES_MONITORING_CAPABILITY }
    if is_advanced_deployment(config):
        capabilities.add(ROUTING_CAPABILITY)
    if config.active_gate and config.active_gate.capabilities:
        capabilities.update(c.value for c in config.active_gate.capabilities)
    # sorted so the rendered list does not depend on input order
    return sorted(capabilities)

def get_annotations(config: MonitoringConfig) -> dict[str, str]:
    annotations = { K8S_APP_ENABLED_ANNOTATION: 'true' }
    if is_advanced_deployment(config):
        annotations[INJECTION_READONLY_VOLUME_ANNOTATION] = 'true'
    return annotations

def get_control_plane_tolerations() -> list[dict[str, Any]]:
    tolerations = [client.V1Toleration(
        key=role,
        operator='Exists',
        effect='NoSchedule'
    ) for role in CONTROL_PLANE_NODE_ROLES]
    return client.ApiClient().sanitize_for_serialization(tolerations) # type: ignore[no-any-return]

def create_cloud_native_full_stack_spec(args: ManifestArguments) -> dict[str, Any]:
    full_stack: dict[str, Any] = {}
    one_agent = args.config.one_agent

    if one_agent and one_agent.resources:
        one_agent_resources = create_resource_requirements(one_agent.resources)
        if one_agent_resources:
            full_stack['oneAgentResources'] = one_agent_resources

    full_stack['tolerations'] = get_control_plane_tolerations()
    return full_stack

def create_one_agent_spec(args: ManifestArguments) -> dict[str, Any]:
    config = args.config
    tier = config.deployment_tier
    one_agent: dict[str, Any] = {}

    if tier != DeploymentTier.FULL_STACK and config.one_agent and config.one_agent.resources is not None:
        args.diagnostics.warn(ONE_AGENT_RESOURCES_IGNORED_WARNING)

    if tier == DeploymentTier.PLATFORM:
        pass
    elif tier == DeploymentTier.APPLICATION:
        one_agent['applicationMonitoring'] = {}
    elif tier == DeploymentTier.FULL_STACK:
        one_agent['cloudNativeFullStack'] = create_cloud_native_full_stack_spec(args)
    else:
        raise ValueError(f'Unsupported deployment tier: {tier}')

    if config.host_group is not None:
        one_agent['hostGroup'] = config.host_group

    return one_agent

def create_dyna_kube_manifests(args: ManifestArguments) -> list[dict[str, Any]]:
    config = args.config
    active_gate_resources = config.active_gate.resources if config.active_gate else None

    spec: dict[str, Any] = {
        'apiUrl': config.api_url,
        'metadataEnrichment': {
            'enabled': True,
        },
        'activeGate': {
            'capabilities': get_capabilities(config),
            'resources': create_resource_requirements(active_gate_resources, ACTIVE_GATE_RESOURCE_DEFAULTS),
        },
    }

    one_agent = create_one_agent_spec(args)
    if one_agent:
        spec['oneAgent'] = one_agent

    if config.skip_cert_check is not None:
        spec['skipCertCheck'] = config.skip_cert_check

    dyna_kube = {
        'apiVersion': DYNA_KUBE_API_VERSION,
        'kind': DYNA_KUBE_KIND,
        'metadata': {
            'name': args.dyna_kube_name,
            'namespace': args.namespace_name,
            'annotations': get_annotations(config),
        },
        'spec': spec,
    }
    return [dyna_kube]
