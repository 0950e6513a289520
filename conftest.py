"""pytest共通設定。"""

import os

import pytest

# テスト実行時にSQLiteのインメモリDBを使用するように環境変数を設定
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["USER_STORE"] = "memory"


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """anyioのバックエンドを指定。"""
    return "asyncio"
