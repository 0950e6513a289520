"""UserRepository implementation using SQLAlchemy."""

from typing import cast

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import User
from src.domain.exceptions import RepositoryError
from src.domain.repositories import UserRepository
from src.domain.value_objects import Paged, UserId

from ..database.models import UserModel


class UserRepositoryImpl(UserRepository):
    """Concrete implementation of UserRepository using SQLAlchemy.

    SQLAlchemy errors are raised as RepositoryError; anything else propagates
    unchanged.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession instance for database operations
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a live user by ID.

        Args:
            user_id: The user ID to search for

        Returns:
            The user if found and not deleted, None otherwise

        Raises:
            RepositoryError: If the find operation fails
        """
        try:
            stmt = select(UserModel).where(
                UserModel.id == user_id.to_uuid(),
                UserModel.deleted == False,  # noqa: E712
            )
            result = await self.session.execute(stmt)
            user_model = result.scalar_one_or_none()
            return user_model.to_domain() if user_model else None
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to find user by ID: {str(e)}") from e

    async def find_paged(self, page: int, page_size: int) -> Paged[User]:
        """Find one page of live users ordered by creation time.

        Args:
            page: Zero-based page index
            page_size: Number of users per page

        Returns:
            The page of users with total item and page counts

        Raises:
            RepositoryError: If the find operation fails
        """
        try:
            count_stmt = (
                select(func.count())
                .select_from(UserModel)
                .where(UserModel.deleted == False)  # noqa: E712
            )
            total_items = cast(int, (await self.session.execute(count_stmt)).scalar())
            if total_items == 0:
                return Paged.empty(page=page, page_size=page_size)

            stmt = (
                select(UserModel)
                .where(UserModel.deleted == False)  # noqa: E712
                .order_by(UserModel.created_at, UserModel.id)
                .offset(page * page_size)
                .limit(page_size)
            )
            result = await self.session.execute(stmt)
            users = [user_model.to_domain() for user_model in result.scalars().all()]
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to find users page: {str(e)}") from e

        return Paged.create(
            items=users, page=page, page_size=page_size, total_items=total_items
        )

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find the live users matching the given IDs.

        Args:
            user_ids: The user IDs to search for

        Returns:
            The users found; missing or deleted IDs are skipped

        Raises:
            RepositoryError: If the find operation fails
        """
        if not user_ids:
            return []

        try:
            stmt = (
                select(UserModel)
                .where(
                    UserModel.id.in_([user_id.to_uuid() for user_id in user_ids]),
                    UserModel.deleted == False,  # noqa: E712
                )
                .order_by(UserModel.created_at, UserModel.id)
            )
            result = await self.session.execute(stmt)
            return [user_model.to_domain() for user_model in result.scalars().all()]
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to find users by IDs: {str(e)}") from e

    async def save(self, user: User) -> User:
        """Insert or update a user by ID.

        Args:
            user: The user entity to save

        Returns:
            The user as stored

        Raises:
            RepositoryError: If the save operation fails
        """
        try:
            user_model = UserModel.from_domain(user)

            existing = await self.session.get(UserModel, user_model.id)
            if existing:
                for attr, value in user_model.__dict__.items():
                    if not attr.startswith("_"):
                        setattr(existing, attr, value)
                stored = existing
            else:
                self.session.add(user_model)
                stored = user_model

            await self.session.flush()
            return stored.to_domain()
        except IntegrityError as e:
            raise RepositoryError(f"Failed to save user {user.id}: {str(e.orig)}") from e
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to save user: {str(e)}") from e

    async def delete_by_id(self, user_id: UserId) -> bool:
        """Physically delete a user by ID.

        Args:
            user_id: The ID of the user to delete

        Returns:
            True if no live user with the ID remains

        Raises:
            RepositoryError: If the delete operation fails
        """
        try:
            await self.session.execute(
                delete(UserModel).where(UserModel.id == user_id.to_uuid())
            )
            await self.session.flush()

            stmt = (
                select(func.count())
                .select_from(UserModel)
                .where(
                    UserModel.id == user_id.to_uuid(),
                    UserModel.deleted == False,  # noqa: E712
                )
            )
            remaining = cast(int, (await self.session.execute(stmt)).scalar())
            return remaining == 0
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to delete user: {str(e)}") from e
