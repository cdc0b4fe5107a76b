import os

def load_existing_file(fn):
    if os.path.isfile(fn):
        with open(fn, 'r') as f:
            return f.read()
    raise ValueError(f"Could not find file {fn}")

def parse_bool_env_var(var_name, default=False):
    value = os.getenv(var_name)
    if value is None:
        return default
    value_str = str(value).strip().lower()
    if value_str.isdigit():
        return int(value_str) != 0
    return value_str == 'true'
