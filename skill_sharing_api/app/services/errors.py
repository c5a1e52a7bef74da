"""
Exceptions raised by the service layer.

Endpoints translate these into HTTP responses.  "User already exists"
is not among them: it is a successful outcome of an idempotent create.
"""


class UserServiceError(Exception):
    """Base class for user service failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserValidationError(UserServiceError, ValueError):
    """A required field of the create payload is missing or empty."""


class UserNotFoundError(UserServiceError, LookupError):
    """The requested user could not be returned.

    Raised both when the user does not exist and when the lookup itself
    failed; the cause of a failed lookup is logged, never exposed.
    """

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class UserStoreError(UserServiceError):
    """Persisting a new user failed.  ``message`` carries the store's detail."""
