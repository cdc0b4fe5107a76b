from .models import CompilationResult, Diagnostics
from ..models import *
from .defaults import create_manifest_arguments
from .namespace import create_namespace_manifests
from .secret import create_secret_manifests
from .dynakube import create_dyna_kube_manifests


def create_manifests(config: MonitoringConfig) -> CompilationResult:
    diagnostics = Diagnostics()
    args = create_manifest_arguments(config, diagnostics)

    manifests = []
    manifests += create_namespace_manifests(args)
    manifests += create_secret_manifests(args)
    manifests += create_dyna_kube_manifests(args)

    return CompilationResult(
        manifests=manifests,
        warnings=list(diagnostics.warnings)
    )
