"""UserId value object implementation."""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """Value object representing a user identifier."""

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the user ID format."""
        if not self.value:
            raise ValueError("User ID cannot be empty")

        try:
            normalized = str(uuid.UUID(str(self.value)))
        except ValueError as e:
            raise ValueError(f"Invalid user ID format: {self.value}") from e

        object.__setattr__(self, "value", normalized)

    @classmethod
    def generate(cls) -> "UserId":
        """Generate a new user ID."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "UserId":
        """Create a user ID from a UUID instance."""
        return cls(str(value))

    def to_uuid(self) -> uuid.UUID:
        """Return the identifier as a UUID instance."""
        return uuid.UUID(self.value)

    def __str__(self) -> str:
        """Return string representation."""
        return self.value
