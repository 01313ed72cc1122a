"""Business errors raised by the account and session layers."""

from fastapi import status


class CodetrackError(Exception):
    """Base class for errors that map onto an API response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(CodetrackError):
    """The request payload is malformed or fails validation."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class ConflictError(CodetrackError):
    """An account with the same email already exists."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class NotFoundError(CodetrackError):
    """The referenced account does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "User does not exist"


class UnauthorizedError(CodetrackError):
    """The request carries no valid session claim."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class InternalError(CodetrackError):
    """A storage failure. The cause is logged, never returned to the caller."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"


class LoginError(CodetrackError):
    """Login was refused. Unknown email and wrong password share this error."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid credentials"
