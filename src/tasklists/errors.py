"""Exception types raised by the Task Lists core.

Each error carries a stable ``code``. GraphQL execution copies an exception's
``extensions`` mapping onto the reported error, so clients see it as
``errors[].extensions.code``.
"""

from typing import Any


class TaskListsError(Exception):
    """Base class for errors surfaced to API callers."""

    code = "INTERNAL_SERVER_ERROR"

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class AuthenticationError(TaskListsError):
    """Raised when the caller's identity cannot be established."""

    code = "UNAUTHENTICATED"


class Unauthenticated(AuthenticationError):
    """Raised when a mutation is attempted without a valid identity."""

    def __init__(self, message: str = "Authentication Error! Please sign in"):
        super().__init__(message)


class InvalidCredential(AuthenticationError):
    """Raised on sign-in failure.

    The message is identical for an unknown email and a wrong password.
    """

    code = "INVALID_CREDENTIAL"

    def __init__(self) -> None:
        super().__init__("Invalid Credential")


class NotFoundError(TaskListsError):
    """Raised when a write targets a record that does not exist."""

    code = "NOT_FOUND"


class ValidationError(TaskListsError):
    """Raised when startup configuration is invalid."""

    code = "CONFIGURATION_ERROR"
