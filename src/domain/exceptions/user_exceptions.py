"""User related exceptions."""

from .base import DomainException


class UserError(DomainException):
    """Base exception for user errors."""

    pass


class UnknownUserRoleError(UserError, ValueError):
    """Exception raised when a role code does not match any known role."""

    def __init__(self, code: object) -> None:
        """Initialize the exception.

        Args:
            code: The rejected role code
        """
        super().__init__(f"Unknown user role code: {code}")
        self.code = code


class UserNotFoundError(UserError):
    """Exception raised when a live user with the given ID does not exist."""

    def __init__(self, user_id: str, operation: str | None = None) -> None:
        """Initialize the exception.

        Args:
            user_id: The ID that was looked up
            operation: Tag of the operation that failed
        """
        prefix = f"{operation} " if operation else ""
        super().__init__(f"{prefix}User with id '{user_id}' not found")
        self.user_id = user_id
        self.operation = operation


class UserPersistenceError(UserError):
    """Exception raised when the store fails while persisting or reading a user.

    The underlying RepositoryError is kept as ``__cause__``.
    """

    def __init__(self, operation: str, message: str) -> None:
        """Initialize the exception.

        Args:
            operation: Tag of the operation that failed
            message: Description of the failure
        """
        super().__init__(f"{operation} {message}")
        self.operation = operation
