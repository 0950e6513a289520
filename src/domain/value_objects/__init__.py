"""値オブジェクトパッケージ。"""

from .paged import Paged
from .user_id import UserId
from .user_role import UserRole

__all__ = [
    "Paged",
    "UserId",
    "UserRole",
]
