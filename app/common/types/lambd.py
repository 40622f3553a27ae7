# lambda is a reserved name in Python, hence the module name lambd
from typing import Any, Dict, Protocol


class _Identity(Protocol):
    cognito_identity_id: str
    cognito_identity_pool_id: str


class _ClientContext(Protocol):
    """Client context that's provided to Lambda by the client application."""

    custom: Dict[Any, Any]
    env: Dict[str, Any]


class LambdaContext(Protocol):
    """Lambda context object type.

    Cognito triggers don't use the context, it's only here for the handler
    signature.

    .. _AWS docs:
        https://docs.aws.amazon.com/lambda/latest/dg/python-context-object.html  # noqa 501

    """

    function_name: str
    function_version: str
    invoked_function_arn: str
    memory_limit_in_mb: str
    aws_request_id: str
    log_group_name: str
    log_stream_name: str
    identity: _Identity
    client_context: _ClientContext

    def get_remaining_time_in_millis(self) -> int:
        ...
