from typing import Dict, Literal, TypedDict


# BEGIN _TriggerEventBase
_PreSignUpTriggerSource = Literal[
    'PreSignUp_SignUp',
    'PreSignUp_AdminCreateUser',
    'PreSignUp_ExternalProvider']


class _CallerContext(TypedDict):
    """The caller context."""

    awsSdkVersion: str
    clientId: str


class _RequestBase(TypedDict):
    """The request from the Amazon Cognito service."""

    userAttributes: Dict[str, str]


class _TriggerEventBase(TypedDict):
    """User Pool Lambda trigger event common parameters.

    Specific event types extend this class.

    .. _AWS docs for the event:
        https://docs.aws.amazon.com/cognito/latest/developerguide/cognito-user-identity-pools-working-with-aws-lambda-triggers.html#cognito-user-pools-lambda-trigger-event-parameter-shared  # noqa 501

    """

    version: str
    region: str
    userPoolId: str
    userName: str
    callerContext: _CallerContext
# END _TriggerEventBase


# BEGIN PreSignUpEvent
class _PreSignUpRequestTotal(_RequestBase):
    """Pre Sign-up Lambda Trigger Request."""

    validationData: Dict[str, str]


class _PreSignUpRequest(_PreSignUpRequestTotal, total=False):
    # Only present if the client passed ClientMetadata to SignUp
    clientMetadata: Dict[str, str]


# Response flags that mark a contact attribute as verified.
VerifyFlag = Literal['autoVerifyEmail', 'autoVerifyPhone']


# Cognito sends an empty response. A flag that is not set keeps its default
# (eg. the user must confirm the account), so flags are optional.
class PreSignUpResponse(TypedDict, total=False):
    """Pre Sign-up Lambda Trigger Response."""

    autoConfirmUser: bool
    autoVerifyEmail: bool
    autoVerifyPhone: bool


class PreSignUpEvent(_TriggerEventBase):
    """Pre Sign-up Lambda Trigger Event.

    .. _AWS docs:
        https://docs.aws.amazon.com/cognito/latest/developerguide/user-pool-lambda-pre-sign-up.html  # noqa 501

    """

    triggerSource: _PreSignUpTriggerSource
    request: _PreSignUpRequest
    response: PreSignUpResponse
# END PreSignUpEvent
