"""UserRole value object implementation."""

from enum import IntEnum

from ..exceptions.user_exceptions import UnknownUserRoleError


class UserRole(IntEnum):
    """Closed set of user roles, persisted and exchanged by integer code."""

    SYSTEM = 0
    ADMIN = 1
    USER = 2

    @classmethod
    def from_code(cls, code: int) -> "UserRole":
        """Resolve a role from its integer code.

        Args:
            code: The role code

        Returns:
            The matching role

        Raises:
            UnknownUserRoleError: If the code does not belong to any role
        """
        if isinstance(code, bool):
            raise UnknownUserRoleError(code)
        for role in cls:
            if role.value == code:
                return role
        raise UnknownUserRoleError(code)

    @property
    def code(self) -> int:
        """Return the integer code of the role."""
        return int(self.value)

    def __str__(self) -> str:
        """Return string representation."""
        return self.name
