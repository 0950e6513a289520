"""インメモリのユーザーリポジトリ実装。

テストとデータベースを用意しないローカル実行のための実装。
"""

from src.domain.entities import User
from src.domain.repositories import UserRepository
from src.domain.value_objects import Paged, UserId


class InMemoryUserRepository(UserRepository):
    """辞書にユーザーを保持するリポジトリ。

    挿入順を保持し、論理削除されたユーザーは読み取り系から除外する。
    """

    def __init__(self, users: list[User] | None = None) -> None:
        """初期化。

        Args:
            users: 初期データ
        """
        self.users: dict[str, User] = {}
        for user in users or []:
            self.users[user.id.value] = user

    def _live_users(self) -> list[User]:
        return [user for user in self.users.values() if not user.deleted]

    async def find_by_id(self, user_id: UserId) -> User | None:
        """IDで論理削除されていないユーザーを検索する。"""
        user = self.users.get(user_id.value)
        if user is None or user.deleted:
            return None
        return user

    async def find_paged(self, page: int, page_size: int) -> Paged[User]:
        """論理削除されていないユーザーを1ページ分取得する。"""
        live = self._live_users()
        start = page * page_size
        return Paged.create(
            items=live[start : start + page_size],
            page=page,
            page_size=page_size,
            total_items=len(live),
        )

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """複数IDで論理削除されていないユーザーを取得する。"""
        wanted = {user_id.value for user_id in user_ids}
        return [user for user in self._live_users() if user.id.value in wanted]

    async def save(self, user: User) -> User:
        """ユーザーを保存する（IDで上書き）。"""
        self.users[user.id.value] = user
        return user

    async def delete_by_id(self, user_id: UserId) -> bool:
        """ユーザーを物理削除する。"""
        self.users.pop(user_id.value, None)
        return await self.find_by_id(user_id) is None
