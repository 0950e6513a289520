"""Infrastructure repository implementations."""

from .in_memory_user_repository import InMemoryUserRepository
from .user_repository_impl import UserRepositoryImpl

__all__ = [
    "InMemoryUserRepository",
    "UserRepositoryImpl",
]
