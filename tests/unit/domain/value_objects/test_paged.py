"""Pagedのテスト。"""

import pytest

from src.domain.value_objects import Paged


class TestPaged:
    """Pagedのテストクラス。"""

    @pytest.mark.parametrize(
        ("total_items", "page_size", "expected"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (8, 5, 2)],
    )
    def test_count_pages(self, total_items: int, page_size: int, expected: int) -> None:
        """総ページ数が切り上げで計算されることを確認する。"""
        assert Paged.count_pages(total_items, page_size) == expected

    def test_create(self) -> None:
        """createで総ページ数が設定されることを確認する。"""
        paged = Paged.create(items=["a", "b", "c"], page=1, page_size=5, total_items=8)

        assert paged.items == ["a", "b", "c"]
        assert paged.page == 1
        assert paged.page_size == 5
        assert paged.total_items == 8
        assert paged.total_pages == 2

    def test_empty(self) -> None:
        """要素が無い場合は総ページ数が0になることを確認する。"""
        paged: Paged[str] = Paged.empty(page=0, page_size=10)

        assert paged.items == []
        assert paged.total_items == 0
        assert paged.total_pages == 0

    def test_map_keeps_page_info(self) -> None:
        """mapでページ情報が保持されることを確認する。"""
        paged = Paged.create(items=[1, 2], page=0, page_size=2, total_items=5)

        mapped = paged.map(lambda x: x * 10)

        assert mapped.items == [10, 20]
        assert mapped.page == 0
        assert mapped.page_size == 2
        assert mapped.total_items == 5
        assert mapped.total_pages == 3

    def test_invalid_values(self) -> None:
        """不正なページ情報が拒否されることを確認する。"""
        with pytest.raises(ValueError):
            Paged(items=[], page=-1, page_size=10)
        with pytest.raises(ValueError):
            Paged(items=[], page=0, page_size=0)
        with pytest.raises(ValueError):
            Paged(items=[], page=0, page_size=10, total_items=-1)
