import re
from typing import Any, Mapping

# replace {{ KEY }} with VALUE from env
def hydrate_string(s: str, env: Mapping[str, str]) -> str:
    def rpl(match):
        k = match.group(1).strip()
        if k not in env:
            raise KeyError(f"Key '{k}' not found in environment")
        return env[k]
    p = re.compile(r"{{\s*([^{}\s]+)\s*}}")
    return re.sub(p, rpl, s)

# hydrate every string leaf of a loaded yaml tree, keys are left alone
def hydrate_tree(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return hydrate_string(value, env)
    if isinstance(value, dict):
        return {k: hydrate_tree(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [hydrate_tree(v, env) for v in value]
    return value
