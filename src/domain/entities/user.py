"""User entity implementation."""

from dataclasses import dataclass, replace
from datetime import UTC, date, datetime

from ..value_objects import UserId, UserRole


@dataclass(frozen=True)
class User:
    """User entity representing a registered user.

    The entity is immutable; state transitions return updated copies so the
    caller decides when the new state is persisted.
    """

    id: UserId
    name: str
    email: str
    password: str
    birth_date: date
    phone: str
    role: UserRole
    created_by: UserId
    created_at: datetime
    updated_by: UserId | None = None
    updated_at: datetime | None = None
    deleted: bool = False

    def __post_init__(self) -> None:
        """Validate user entity."""
        if not isinstance(self.id, UserId):
            raise TypeError("id must be a UserId instance")
        if not isinstance(self.created_by, UserId):
            raise TypeError("created_by must be a UserId instance")
        if self.updated_by is not None and not isinstance(self.updated_by, UserId):
            raise TypeError("updated_by must be a UserId instance")
        if not isinstance(self.role, UserRole):
            raise TypeError("role must be a UserRole instance")

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password: str,
        birth_date: date,
        phone: str,
        role: UserRole,
        created_by: UserId,
    ) -> "User":
        """Create a new user with generated ID."""
        return cls(
            id=UserId.generate(),
            name=name,
            email=email,
            password=password,
            birth_date=birth_date,
            phone=phone,
            role=role,
            created_by=created_by,
            created_at=datetime.now(UTC),
            deleted=False,
        )

    def with_name(self, name: str, updated_by: UserId) -> "User":
        """Return a copy with the name replaced and the modifier stamped."""
        return replace(
            self,
            name=name,
            updated_by=updated_by,
            updated_at=datetime.now(UTC),
        )

    def with_deleted(self, deleted_by: UserId) -> "User":
        """Return a soft-deleted copy stamped with the deleter."""
        return replace(
            self,
            deleted=True,
            updated_by=deleted_by,
            updated_at=datetime.now(UTC),
        )

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.id}, {self.name}, role={self.role})"
