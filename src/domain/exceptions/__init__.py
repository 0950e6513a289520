"""ドメイン層の例外定義パッケージ。"""

from .base import DomainException, RepositoryError
from .user_exceptions import (
    UnknownUserRoleError,
    UserError,
    UserNotFoundError,
    UserPersistenceError,
)

__all__ = [
    # Base
    "DomainException",
    "RepositoryError",
    # User
    "UnknownUserRoleError",
    "UserError",
    "UserNotFoundError",
    "UserPersistenceError",
]
