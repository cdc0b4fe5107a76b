from .models import DATA_INGEST_TOKEN_IGNORED_WARNING, ManifestArguments
from .defaults import is_advanced_deployment
from typing import Any
from kubernetes import client

def create_secret_data(args: ManifestArguments) -> dict[str, str]:
    tokens = args.config.tokens
    string_data = {
        'apiToken': tokens.api_token,
    }

    if tokens.data_ingest_token:
        if is_advanced_deployment(args.config):
            string_data['dataIngestToken'] = tokens.data_ingest_token
        else:
            args.diagnostics.warn(DATA_INGEST_TOKEN_IGNORED_WARNING)

    return string_data

def create_secret_manifests(args: ManifestArguments) -> list[dict[str, Any]]:
    secret = client.V1Secret(
        api_version="v1",
        kind="Secret",
        type="Opaque",
        metadata=client.V1ObjectMeta(
            name=args.secret_name,
            namespace=args.namespace_name,
        ),
        string_data=create_secret_data(args)
    )
    return [client.ApiClient().sanitize_for_serialization(secret)] # type: ignore[no-any-return]
