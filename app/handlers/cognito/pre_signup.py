from typing import List, Mapping, Tuple

from app.common.errors import InvalidEventError
from app.common.logging import get_logger
from app.common.types.cognito import PreSignUpEvent, PreSignUpResponse, \
    VerifyFlag
from app.common.types.lambd import LambdaContext


_logger = get_logger(__name__)

# Contact attribute name -> response flag that marks it as verified.
# Order determines the order of `get_verified_attributes` results.
_VERIFY_FLAGS: Tuple[Tuple[str, VerifyFlag], ...] = (
    ('email', 'autoVerifyEmail'),
    ('phone_number', 'autoVerifyPhone'),
)


def get_verified_attributes(user_attributes: Mapping[str, str]) \
        -> List[VerifyFlag]:
    """Get the response flags to set for the contact attributes present.

    Only the presence of the attribute matters, an empty string value counts.

    Args:
        user_attributes: The user attributes from the sign-up request.

    Returns:
        The names of the response flags, eg. ['autoVerifyEmail'].

    """
    return [flag for attr, flag in _VERIFY_FLAGS if attr in user_attributes]


def _get_user_attributes(event: PreSignUpEvent) -> Mapping[str, str]:
    request = event.get('request')
    if not isinstance(request, Mapping):
        raise InvalidEventError('Missing or invalid request in pre sign-up '
                                'event')
    user_attributes = request.get('userAttributes')
    if not isinstance(user_attributes, Mapping):
        raise InvalidEventError('Missing or invalid request.userAttributes '
                                'in pre sign-up event')
    return user_attributes


def _get_response(event: PreSignUpEvent) -> PreSignUpResponse:
    # Cognito sends an empty dict, but test tools often send null.
    if event.get('response') is None:
        event['response'] = {}
    response = event['response']
    if not isinstance(response, Mapping):
        raise InvalidEventError('Invalid response in pre sign-up event')
    return response


def handler(event: PreSignUpEvent, _: LambdaContext) -> PreSignUpEvent:
    """Cognito pre-sign up Lambda event handler."""
    try:
        user_attributes = _get_user_attributes(event)
        response = _get_response(event)
    except InvalidEventError as e:
        _logger.error(f'Rejecting sign-up of {event.get("userName")}: {e}')
        raise

    # Every user is confirmed, so they can log in right after signing up.
    response['autoConfirmUser'] = True
    for flag in get_verified_attributes(user_attributes):
        response[flag] = True

    _logger.debug(f'{event.get("triggerSource")} for {event.get("userName")}: '
                  f'{response}')

    return event
