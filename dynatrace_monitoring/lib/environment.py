import os
from dotenv import dotenv_values

def load_environment(env_file: str | None = None) -> dict[str, str]:
    """Process environment, overlaid with the values of `env_file` when given."""
    env = dict(os.environ)
    if env_file is not None:
        if not os.path.isfile(env_file):
            raise ValueError(f"Could not find file {env_file}")
        values = dotenv_values(env_file)
        env.update({ k: v or "" for k, v in values.items() })
    return env
