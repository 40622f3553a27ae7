import json
import os
from pathlib import Path
from typing import List, Mapping, NamedTuple, Optional, TypedDict


class Config(NamedTuple):
    """App configuration."""

    log_level: str


class CloudFormationParam(TypedDict):
    """CloudFormation parameter values.

    .. _AWS docs:
        https://docs.aws.amazon.com/AWSCloudFormation/latest/APIReference/API_Parameter.html
    """

    ParameterKey: str
    ParameterValue: str


def _build_config(env: Mapping[str, str],
                  params: List[CloudFormationParam]) -> Config:
    """Build configuration object for the application.

    Args:
        env: A mapping object representing the string environment (os.environ).
        params: A list of CloudFormation parameters as expected by
            aws.templates.create-stack.
            .. _AWS docs:
                https://docs.aws.amazon.com/cli/latest/reference/cloudformation/create-stack.html#options

    Returns:
        The configuration object.

    Raises:
        KeyError if a required parameter is missing from `params`.

    """
    pdict = {p['ParameterKey']: p['ParameterValue'] for p in params}
    # Required, it should be an error if it is missing from `pdict`.
    log_level = pdict['LogLevel']

    if env.get('TOX_TESTENV'):
        log_level = 'WARNING'

    return Config(log_level=log_level)


_config: Optional[Config] = None


def _get_config() -> Config:
    """Lazy load config."""
    global _config
    if _config is None:
        target = os.environ.get('DEPLOYMENT_TARGET', 'dev')
        common_dir = Path(__file__).parent
        fname = f'configs/{target}.json'
        p = common_dir / fname
        with open(p) as f:
            _config = _build_config(os.environ, json.load(f))
    return _config


def __getattr__(name: str) -> Config:
    """Get a module level attribute.

    (New in Python 3.7.)
    """
    if name == 'config':
        return _get_config()
    else:
        raise AttributeError(f"module {__name__} has no attribute {name}")
