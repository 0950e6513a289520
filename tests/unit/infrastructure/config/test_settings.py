"""Settingsのテスト。"""

import logging

import pytest
from pydantic import ValidationError

from src.infrastructure.config import Settings, configure_logging


class TestSettings:
    """Settingsのテストクラス。"""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """デフォルト値を確認する。"""
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("USER_STORE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.database_url.startswith("sqlite+aiosqlite")
        assert settings.is_sqlite is True
        assert settings.user_store == "sql"
        assert settings.log_level == "INFO"
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """環境変数から読み込まれることを確認する。"""
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/users")
        monkeypatch.setenv("USER_STORE", "memory")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.is_sqlite is False
        assert settings.user_store == "memory"
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        """不正なログレベルが拒否されることを確認する。"""
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, log_level="verbose")

    def test_invalid_user_store(self) -> None:
        """不正なストア種別が拒否されることを確認する。"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, user_store="redis")

    def test_default_page_size_exceeds_max(self) -> None:
        """デフォルト件数が最大件数を超える設定が拒否されることを確認する。"""
        with pytest.raises(ValidationError, match="default_page_size"):
            Settings(_env_file=None, default_page_size=50, max_page_size=20)

    def test_cors_wildcard_with_origins(self) -> None:
        """ワイルドカードと個別オリジンの併用が拒否されることを確認する。"""
        with pytest.raises(ValidationError, match="wildcard"):
            Settings(_env_file=None, cors_allowed_origins=["*", "http://a.com"])

    def test_configure_logging(self) -> None:
        """ログレベルが設定されることを確認する。"""
        configure_logging(Settings(_env_file=None, log_level="WARNING"))

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
