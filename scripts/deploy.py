#!/usr/bin/env python3
"""Build and deploy the Cognito pre sign-up stack with AWS SAM.

Run from repo root.

"""
import argparse
import json
import logging
import shutil
import subprocess
import sys
import tempfile
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import toml


_IGNORE_BINARY = shutil.ignore_patterns('__pycache__',
                                        '*.py[cod]',
                                        '*$py.class',
                                        '*.so')
# Order of fresh deployments
SERVICES = ('cognito',)
TARGETS = ('dev', 'staging', 'production')

_CONFIGS_DIR = 'app/common/configs'
_MANIFEST = 'requirements/requirements.txt'
_SAM_CONFIG = 'samconfig.toml'


def get_stack_name(service_name: str, deployment_target: str) -> str:
    """Get the CloudFormation stack name, eg. 'CognitoService-Dev'."""
    service_cap = service_name.capitalize()
    target_cap = deployment_target.capitalize()
    return f'{service_cap}Service-{target_cap}'


def load_params(deployment_target: str) -> List[Dict[str, str]]:
    """Load the CloudFormation parameters of a deployment target.

    Raises:
        OSError if the target has no parameter file.

    """
    with open(f'{_CONFIGS_DIR}/{deployment_target}.json') as f:
        return json.load(f)


def param_overrides_to_str(params: List[Dict[str, str]]) -> str:
    # sam deploy doesn't support passing JSON, all params must be passed
    # as a single string
    return ' '.join(f'{p["ParameterKey"]}={p["ParameterValue"]}'
                    for p in params)


def get_param_overrides(deployment_target: str) -> str:
    return param_overrides_to_str(load_params(deployment_target))


def load_sam_config(path: str = _SAM_CONFIG) -> Dict[str, Any]:
    with open(path) as f:
        return toml.load(f)


def get_sam_param(sam_config: Mapping[str, Any], target: str,
                  param: str) -> str:
    """Get a `sam deploy` parameter for a deployment target.

    Raises:
        KeyError if the parameter is not configured for the target.

    """
    return sam_config[target]['deploy']['parameters'][param]


def get_build_cmd(service_name: str, base_dir: str) -> List[str]:
    return ['sam', 'build',
            '--template', f'cloudformation/{service_name}.yml',
            '--manifest', _MANIFEST,
            '--base-dir', base_dir]


def get_deploy_cmd(stack_name: str, s3_bucket: str,
                   param_overrides: str = '') -> List[str]:
    # The stack creates the IAM role of the trigger function.
    cmd = ['sam', 'deploy',
           '--no-fail-on-empty-changeset',
           '--capabilities', 'CAPABILITY_IAM',
           '--stack-name', stack_name,
           '--s3-bucket', s3_bucket]
    if param_overrides:
        cmd.extend(['--parameter-overrides', param_overrides])
    return cmd


def get_deployment_bucket(sam_config: Mapping[str, Any],
                          deployment_target: str) -> str:
    """Get the artifact bucket of the target, create the SAM bucket if unset.

    Raises:
        KeyError if neither the target's bucket nor the default region is
            configured.

    """
    try:
        return get_sam_param(sam_config, deployment_target, 's3_bucket')
    except KeyError:
        region = get_sam_param(sam_config, 'default', 'region')
        return _create_deployment_bucket(region)


def _create_deployment_bucket(region: str) -> str:
    # samcli is only needed if the target has no bucket configured.
    from samcli.lib.bootstrap import bootstrap

    logging.info(f'Setting up SAM deployment bucket in {region}...')
    # Gets AWS profile from ambient configuration.
    return bootstrap.manage_stack(profile=None, region=region)


def build_service(service_name: str) -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        # Only the `app` package goes into the deployment artifact.
        shutil.copytree('app', f'{tmpdir}/app', ignore=_IGNORE_BINARY)
        subprocess.run(get_build_cmd(service_name, tmpdir), check=True)


def deploy_service(service_name: str, deployment_target: str) -> str:
    """Deploy a built service.

    Returns:
        The name of the deployed stack.

    Raises:
        subprocess.CalledProcessError if `sam deploy` fails.

    """
    s3_bucket = get_deployment_bucket(load_sam_config(), deployment_target)
    stack_name = get_stack_name(service_name, deployment_target)
    cmd = get_deploy_cmd(stack_name, s3_bucket,
                         get_param_overrides(deployment_target))
    subprocess.run(cmd, check=True)
    return stack_name


def get_services(service_name: Optional[str], deploy_all: bool) \
        -> Tuple[str, ...]:
    """Get the services to deploy in deployment order.

    Raises:
        ValueError if neither a service name nor `deploy_all` is given.

    """
    if deploy_all:
        return SERVICES
    if service_name:
        return (service_name,)
    raise ValueError('One of --service_name or --deploy_all must be '
                     'specified')


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('-t', '--target', type=str, required=True,
                        choices=TARGETS,
                        help='Deployment target')
    parser.add_argument('-n', '--service_name', type=str,
                        choices=SERVICES,
                        help='Service name')
    parser.add_argument('--deploy_all', action='store_true',
                        help='Deploy all services')
    args = parser.parse_args(argv)

    try:
        services = get_services(args.service_name, args.deploy_all)
    except ValueError as e:
        logging.error(e)
        return 1

    deployed = []
    for name in services:
        build_service(name)
        deployed.append(deploy_service(name, args.target))
    for stack_name in deployed:
        logging.info(f'+++ Successfully deployed {stack_name} +++')
    return 0


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
