"""FastAPIの依存性注入設定。"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from ..application.use_cases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetAllUsersUseCase,
    GetUserByIdUseCase,
    UpdateUserUseCase,
)
from ..domain.repositories import UserRepository
from ..domain.value_objects import UserId
from ..infrastructure.config import get_logger, get_settings
from ..infrastructure.database.connection import db_manager
from ..infrastructure.repositories import InMemoryUserRepository, UserRepositoryImpl


@lru_cache
def get_in_memory_user_repository() -> InMemoryUserRepository:
    """プロセス内で共有するインメモリリポジトリを取得する。"""
    return InMemoryUserRepository()


async def get_user_repository() -> AsyncGenerator[UserRepository, None]:
    """設定に応じたユーザーリポジトリを取得する。

    Yields:
        UserRepository: ユーザーリポジトリ
    """
    if get_settings().user_store == "memory":
        yield get_in_memory_user_repository()
        return

    async with db_manager.get_session() as session:
        yield UserRepositoryImpl(session=session)


async def get_actor_id(
    x_actor_id: Annotated[str | None, Header()] = None,
) -> UserId:
    """操作を行うユーザーのIDを取得する。

    認証基盤が無いため、X-Actor-Idヘッダーが無い場合はランダムなIDで代替する。

    Args:
        x_actor_id: X-Actor-Idヘッダーの値

    Returns:
        UserId: 操作者のID

    Raises:
        HTTPException: ヘッダーの値がUUIDでない場合
    """
    if x_actor_id is None:
        return UserId.generate()
    try:
        return UserId(x_actor_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid X-Actor-Id header: {x_actor_id}",
        ) from e


UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]


async def get_create_user_use_case(
    user_repository: UserRepositoryDep,
) -> CreateUserUseCase:
    """ユーザー作成ユースケースを取得する。"""
    return CreateUserUseCase(
        user_repository=user_repository,
        logger=get_logger(CreateUserUseCase.__module__),
    )


async def get_update_user_use_case(
    user_repository: UserRepositoryDep,
) -> UpdateUserUseCase:
    """ユーザー更新ユースケースを取得する。"""
    return UpdateUserUseCase(
        user_repository=user_repository,
        logger=get_logger(UpdateUserUseCase.__module__),
    )


async def get_delete_user_use_case(
    user_repository: UserRepositoryDep,
) -> DeleteUserUseCase:
    """ユーザー削除ユースケースを取得する。"""
    return DeleteUserUseCase(
        user_repository=user_repository,
        logger=get_logger(DeleteUserUseCase.__module__),
    )


async def get_get_user_by_id_use_case(
    user_repository: UserRepositoryDep,
) -> GetUserByIdUseCase:
    """ユーザー取得ユースケースを取得する。"""
    return GetUserByIdUseCase(
        user_repository=user_repository,
        logger=get_logger(GetUserByIdUseCase.__module__),
    )


async def get_get_all_users_use_case(
    user_repository: UserRepositoryDep,
) -> GetAllUsersUseCase:
    """ユーザー一覧取得ユースケースを取得する。"""
    return GetAllUsersUseCase(
        user_repository=user_repository,
        logger=get_logger(GetAllUsersUseCase.__module__),
    )
