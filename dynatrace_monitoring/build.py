import argparse, sys
from typing import Mapping

from .lib.environment import load_environment
from .lib.hydration import hydrate_tree
from .lib.yaml_tools import load_string, dump_manifests
from .create_manifests import create_manifests
from .models import MonitoringConfig, validate_monitoring_yaml
from .utils import load_existing_file, parse_bool_env_var

DEBUG = parse_bool_env_var('DEBUG')

def load_config(fn: str, env: Mapping[str, str]) -> MonitoringConfig:
    # placeholders are filled in after parsing so values are never read as yaml
    data = load_string(load_existing_file(fn))
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of {fn}")
    return validate_monitoring_yaml(hydrate_tree(data, env))

def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog='dynatrace-manifests')
    parser.add_argument('config', help='monitoring configuration file')
    parser.add_argument('-o', '--output', help='file to write the manifests to, defaults to stdout')
    parser.add_argument('--env-file', help='dotenv file with values for {{ KEY }} placeholders')
    args = parser.parse_args(argv)

    env = load_environment(args.env_file)
    config = load_config(args.config, env)
    result = create_manifests(config)

    for warning in result.warnings:
        print(warning, file=sys.stderr)

    manifests_string = dump_manifests(result.manifests)
    if args.output:
        with open(args.output, 'w') as f:
            f.write(manifests_string)
    else:
        sys.stdout.write(manifests_string)

def cli():
    if DEBUG:
        main()
    else:
        try:
            main()
        # discard stack trace
        except Exception as e:
            print(f"{type(e).__name__}:", e, file=sys.stderr)
            sys.exit(1)

if __name__ == '__main__':
    cli()
