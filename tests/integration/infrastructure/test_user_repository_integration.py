"""Integration tests for UserRepository implementation."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.exceptions import RepositoryError
from src.domain.value_objects import UserId, UserRole
from src.infrastructure.repositories import UserRepositoryImpl

pytestmark = pytest.mark.anyio


@pytest.fixture
async def user_repository(db_session: AsyncSession) -> UserRepositoryImpl:
    """Create a user repository instance."""
    return UserRepositoryImpl(session=db_session)


class TestUserRepositoryIntegration:
    """Integration tests for UserRepository."""

    async def test_save_and_find_by_id(
        self,
        user_repository: UserRepositoryImpl,
        db_session: AsyncSession,
        user_factory,
    ) -> None:
        """Test saving a user and finding by ID."""
        user = user_factory(role=UserRole.ADMIN)

        saved = await user_repository.save(user)
        await db_session.commit()

        assert saved == user
        found = await user_repository.find_by_id(user.id)
        assert found is not None
        assert found.id == user.id
        assert found.name == user.name
        assert found.email == user.email
        assert found.password == user.password
        assert found.birth_date == user.birth_date
        assert found.phone == user.phone
        assert found.role is UserRole.ADMIN
        assert found.created_by == user.created_by
        assert found.created_at == user.created_at
        assert found.updated_by is None
        assert found.updated_at is None
        assert found.deleted is False

    async def test_find_by_id_not_found(
        self, user_repository: UserRepositoryImpl
    ) -> None:
        """Test finding a user by ID that doesn't exist."""
        assert await user_repository.find_by_id(UserId.generate()) is None

    async def test_save_updates_existing(
        self,
        user_repository: UserRepositoryImpl,
        db_session: AsyncSession,
        user_factory,
    ) -> None:
        """Test that saving an existing ID updates the row."""
        user = user_factory(name="Before")
        await user_repository.save(user)
        await db_session.commit()

        modifier = UserId.generate()
        saved = await user_repository.save(user.with_name("After", updated_by=modifier))
        await db_session.commit()

        assert saved.name == "After"
        found = await user_repository.find_by_id(user.id)
        assert found is not None
        assert found.name == "After"
        assert found.updated_by == modifier
        assert found.updated_at is not None
        assert found.created_at == user.created_at

    async def test_soft_deleted_user_is_hidden(
        self,
        user_repository: UserRepositoryImpl,
        db_session: AsyncSession,
        user_factory,
    ) -> None:
        """Test that soft-deleted users are excluded from every read path."""
        live = user_factory()
        gone = user_factory()
        await user_repository.save(live)
        await user_repository.save(gone)
        await user_repository.save(gone.with_deleted(deleted_by=UserId.generate()))
        await db_session.commit()

        assert await user_repository.find_by_id(gone.id) is None
        assert await user_repository.find_by_ids([live.id, gone.id]) == [live]

        paged = await user_repository.find_paged(page=0, page_size=10)
        assert [user.id for user in paged.items] == [live.id]
        assert paged.total_items == 1
        assert paged.total_pages == 1

    async def test_find_paged(
        self,
        user_repository: UserRepositoryImpl,
        db_session: AsyncSession,
        user_factory,
    ) -> None:
        """Test paging ordered by creation time."""
        base = datetime(2024, 1, 1, tzinfo=UTC)
        users = [
            user_factory(name=f"User {i}", created_at=base + timedelta(minutes=i))
            for i in range(8)
        ]
        for user in reversed(users):
            await user_repository.save(user)
        await db_session.commit()

        first = await user_repository.find_paged(page=0, page_size=5)
        second = await user_repository.find_paged(page=1, page_size=5)

        assert [u.name for u in first.items] == [f"User {i}" for i in range(5)]
        assert [u.name for u in second.items] == ["User 5", "User 6", "User 7"]
        assert second.page == 1
        assert second.page_size == 5
        assert second.total_items == 8
        assert second.total_pages == 2

    async def test_find_paged_empty(self, user_repository: UserRepositoryImpl) -> None:
        """Test paging with no users."""
        paged = await user_repository.find_paged(page=0, page_size=10)

        assert paged.items == []
        assert paged.total_items == 0
        assert paged.total_pages == 0

    async def test_find_by_ids_empty(self, user_repository: UserRepositoryImpl) -> None:
        """Test batch lookup with no IDs."""
        assert await user_repository.find_by_ids([]) == []

    async def test_delete_by_id(
        self,
        user_repository: UserRepositoryImpl,
        db_session: AsyncSession,
        user_factory,
    ) -> None:
        """Test physically deleting a user."""
        user = user_factory()
        await user_repository.save(user)
        await db_session.commit()

        assert await user_repository.delete_by_id(user.id) is True
        await db_session.commit()

        assert await user_repository.find_by_id(user.id) is None

    async def test_sqlalchemy_error_is_wrapped(self, user_factory) -> None:
        """Test that SQLAlchemy errors are raised as RepositoryError."""
        session = AsyncMock(spec=AsyncSession)
        session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        repository = UserRepositoryImpl(session=session)

        with pytest.raises(RepositoryError, match="Failed to find user by ID"):
            await repository.find_by_id(UserId.generate())

    async def test_find_paged_skips_page_query_when_empty(self) -> None:
        """Test that an empty store returns an empty page after the count."""
        session = AsyncMock(spec=AsyncSession)
        session.execute.return_value = MagicMock(**{"scalar.return_value": 0})
        repository = UserRepositoryImpl(session=session)

        paged = await repository.find_paged(page=2, page_size=5)

        assert paged.items == []
        assert paged.page == 2
        assert paged.total_pages == 0
        session.execute.assert_awaited_once()

    async def test_other_errors_propagate(self, user_factory) -> None:
        """Test that non-SQLAlchemy errors are not relabelled."""
        session = AsyncMock(spec=AsyncSession)
        session.execute.side_effect = RuntimeError("unexpected")
        repository = UserRepositoryImpl(session=session)

        with pytest.raises(RuntimeError, match="unexpected"):
            await repository.find_paged(page=0, page_size=10)
