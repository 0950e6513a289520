"""SQLAlchemyモデル定義。"""

import uuid
from datetime import UTC, date, datetime

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String, Uuid

from src.domain.entities import User as DomainUser
from src.domain.value_objects import UserId, UserRole

from .connection import Base


def _as_utc(value: datetime | None) -> datetime | None:
    """タイムゾーン情報を持たない日時をUTCとして扱う。

    SQLiteはタイムゾーンを保存しないため、読み出し時に補う。
    """
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


class UserModel(Base):
    """ユーザーテーブルのSQLAlchemyモデル。"""

    __tablename__ = "users"

    id: Column[uuid.UUID] = Column(Uuid(), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    birth_date: Column[date] = Column(Date, nullable=False)
    phone = Column(String(50), nullable=False)
    role = Column(Integer, nullable=False)
    created_at: Column[datetime] = Column(DateTime(timezone=True), nullable=False)
    created_by: Column[uuid.UUID] = Column(Uuid(), nullable=False)
    updated_at: Column[datetime] = Column(DateTime(timezone=True), nullable=True)
    updated_by: Column[uuid.UUID] = Column(Uuid(), nullable=True)
    deleted = Column(Boolean, default=False, nullable=False, index=True)

    def to_domain(self) -> DomainUser:
        """ドメインエンティティに変換する。

        Returns:
            DomainUser: ドメインのユーザーエンティティ
        """
        return DomainUser(
            id=UserId.from_uuid(self.id),  # type: ignore[arg-type]
            name=self.name,  # type: ignore[arg-type]
            email=self.email,  # type: ignore[arg-type]
            password=self.password,  # type: ignore[arg-type]
            birth_date=self.birth_date,  # type: ignore[arg-type]
            phone=self.phone,  # type: ignore[arg-type]
            role=UserRole.from_code(self.role),  # type: ignore[arg-type]
            created_at=_as_utc(self.created_at),  # type: ignore[arg-type]
            created_by=UserId.from_uuid(self.created_by),  # type: ignore[arg-type]
            updated_at=_as_utc(self.updated_at),  # type: ignore[arg-type]
            updated_by=(
                UserId.from_uuid(self.updated_by)  # type: ignore[arg-type]
                if self.updated_by
                else None
            ),
            deleted=bool(self.deleted),
        )

    @classmethod
    def from_domain(cls, user: DomainUser) -> "UserModel":
        """ドメインエンティティからモデルを作成する。

        Args:
            user: ドメインのユーザーエンティティ

        Returns:
            UserModel: SQLAlchemyモデル
        """
        return cls(
            id=user.id.to_uuid(),
            name=user.name,
            email=user.email,
            password=user.password,
            birth_date=user.birth_date,
            phone=user.phone,
            role=user.role.code,
            created_at=user.created_at,
            created_by=user.created_by.to_uuid(),
            updated_at=user.updated_at,
            updated_by=user.updated_by.to_uuid() if user.updated_by else None,
            deleted=user.deleted,
        )
