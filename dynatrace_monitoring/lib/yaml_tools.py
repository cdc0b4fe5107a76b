import yaml
from typing import Any

def _represent_str(dumper, data):
    """
        configures yaml for dumping multiline strings in block style

        Trailing newlines are not stripped, a string that has them goes back to the
        default style so the contents are never changed.
    """

    if data.count('\n') > 0:
        return dumper.represent_scalar('tag:yaml.org,2002:str', data, style='|')
    return dumper.represent_scalar('tag:yaml.org,2002:str', data)

yaml.add_representer(str, _represent_str)

class NoAliasDumper(yaml.Dumper):
    def ignore_aliases(self, data):
        return True

def load_string(s: str) -> Any:
    return yaml.safe_load(s)

def load_all(s: str) -> list[Any]:
    return [doc for doc in yaml.safe_load_all(s) if doc is not None]

# one document per manifest, separated by `---`
def dump_manifests(manifests: list[dict[str, Any]]) -> str:
    yaml_parts = []
    for manifest in manifests:
        yaml_parts.append(yaml.dump(manifest, default_flow_style=False, Dumper=NoAliasDumper))
    return '---\n'.join(yaml_parts)
