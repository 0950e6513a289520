"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Callable
from datetime import UTC, date, datetime
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.domain.entities import User
from src.domain.value_objects import UserId, UserRole
from src.infrastructure.database import models  # noqa: F401
from src.infrastructure.database.connection import Base

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def user_factory() -> Callable[..., User]:
    """Return a factory building users with overridable fields."""

    def _create(**kwargs: Any) -> User:
        defaults: dict[str, Any] = {
            "id": UserId.generate(),
            "name": "Test User",
            "email": "a@x.com",
            "password": "secret",
            "birth_date": date(1990, 5, 17),
            "phone": "+55 11 99999-0000",
            "role": UserRole.USER,
            "created_by": UserId.generate(),
            "created_at": datetime(2024, 1, 1, 12, 0, tzinfo=UTC),
        }
        defaults.update(kwargs)
        return User(**defaults)

    return _create


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create async database session backed by in-memory SQLite."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_maker() as session:
        yield session
        await session.rollback()

    await engine.dispose()
