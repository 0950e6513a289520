"""ページング結果値オブジェクト。"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Paged(Generic[T]):
    """1ページ分の要素とページ情報を保持する値オブジェクト。

    Attributes:
        items: 現在のページの要素（ストアの返却順）
        page: ページ番号（0から開始）
        page_size: 1ページあたりの件数
        total_items: 全ページを通した総件数
        total_pages: 総ページ数
    """

    items: list[T] = field(default_factory=list)
    page: int = 0
    page_size: int = 10
    total_items: int = 0
    total_pages: int = 0

    def __post_init__(self) -> None:
        """ページ情報の検証。"""
        if self.page < 0:
            raise ValueError("page must be greater than or equal to 0")
        if self.page_size < 1:
            raise ValueError("page_size must be greater than or equal to 1")
        if self.total_items < 0 or self.total_pages < 0:
            raise ValueError("totals cannot be negative")

    @staticmethod
    def count_pages(total_items: int, page_size: int) -> int:
        """総ページ数を計算する。

        Args:
            total_items: 総件数
            page_size: 1ページあたりの件数

        Returns:
            総ページ数（要素が無い場合は0）
        """
        if total_items <= 0:
            return 0
        return -(-total_items // page_size)  # 切り上げ

    @classmethod
    def create(
        cls, items: list[T], page: int, page_size: int, total_items: int
    ) -> "Paged[T]":
        """総ページ数を計算してPagedを作成する。"""
        return cls(
            items=list(items),
            page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=cls.count_pages(total_items, page_size),
        )

    @classmethod
    def empty(cls, page: int, page_size: int) -> "Paged[T]":
        """要素を持たないPagedを作成する。"""
        return cls(items=[], page=page, page_size=page_size)

    def map(self, func: Callable[[T], U]) -> "Paged[U]":
        """ページ情報を保ったまま要素を変換する。

        Args:
            func: 要素の変換関数

        Returns:
            変換後の要素を持つPaged
        """
        return Paged(
            items=[func(item) for item in self.items],
            page=self.page,
            page_size=self.page_size,
            total_items=self.total_items,
            total_pages=self.total_pages,
        )
