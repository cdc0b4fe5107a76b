from .models import NAMESPACE_METADATA_IGNORED_WARNING, ManifestArguments
from typing import Any
from kubernetes import client

def create_namespace_manifests(args: ManifestArguments) -> list[dict[str, Any]]:
    metadata = args.config.namespace_metadata

    if args.config.skip_namespace_creation:
        # the namespace is expected to exist already
        if metadata is not None:
            args.diagnostics.warn(NAMESPACE_METADATA_IGNORED_WARNING)
        return []

    ns = client.V1Namespace(
        api_version="v1",
        kind="Namespace",
        metadata=client.V1ObjectMeta(
            name=args.namespace_name,
            labels=(metadata.labels or None) if metadata else None,
            annotations=(metadata.annotations or None) if metadata else None,
        ),
    )
    return [client.ApiClient().sanitize_for_serialization(ns)] # type: ignore[no-any-return]
