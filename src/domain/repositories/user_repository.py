"""User repository interface."""

from abc import ABC, abstractmethod

from ..entities import User
from ..value_objects import Paged, UserId


class UserRepository(ABC):
    """Abstract repository interface for User entities.

    Every read path excludes soft-deleted users.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a live user by ID.

        Args:
            user_id: The user ID to search for

        Returns:
            The user if found and not deleted, None otherwise

        Raises:
            RepositoryError: If the find operation fails
        """
        pass

    @abstractmethod
    async def find_paged(self, page: int, page_size: int) -> Paged[User]:
        """Find one page of live users.

        Args:
            page: Zero-based page index
            page_size: Number of users per page

        Returns:
            The page of users with total item and page counts

        Raises:
            RepositoryError: If the find operation fails
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find the live users matching the given IDs.

        Args:
            user_ids: The user IDs to search for

        Returns:
            The users found; missing or deleted IDs are skipped

        Raises:
            RepositoryError: If the find operation fails
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user by ID.

        Args:
            user: The user entity to save

        Returns:
            The user as stored

        Raises:
            RepositoryError: If the save operation fails
        """
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: UserId) -> bool:
        """Physically delete a user by ID.

        Args:
            user_id: The ID of the user to delete

        Returns:
            True if no live user with the ID remains

        Raises:
            RepositoryError: If the delete operation fails
        """
        pass
