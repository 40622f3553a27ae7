class AppError(Exception):
    """Raised when an app error occurred without a more specific reason.

    All other application errors inherit from this.
    """


class InvalidEventError(AppError, ValueError):
    """Raised when a Lambda trigger event is missing required members.

    Propagates to the Lambda runtime which fails the invocation, eg. Cognito
    rejects the sign-up.
    """
