"""ドメインリポジトリインターフェースパッケージ。"""

from .user_repository import UserRepository

__all__ = [
    "UserRepository",
]
