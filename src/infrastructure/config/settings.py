"""アプリケーション設定管理。"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定。

    環境変数から設定を読み込み、バリデーションを行う。
    """

    # Database Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./users.db",
        description="データベース接続URL（非同期版）",
    )
    user_store: Literal["sql", "memory"] = Field(
        default="sql",
        description="ユーザーストアの種類（sql: データベース, memory: インメモリ）",
    )

    # Application Configuration
    debug: bool = Field(default=False, description="デバッグモード")
    host: str = Field(default="127.0.0.1", description="サーバーのホスト")
    port: int = Field(default=8000, ge=1, le=65535, description="サーバーのポート")
    log_level: str = Field(default="INFO", description="ログレベル")

    # Pagination Configuration
    default_page_size: int = Field(
        default=10, ge=1, description="一覧取得時のデフォルト件数"
    )
    max_page_size: int = Field(default=100, ge=1, description="一覧取得時の最大件数")

    # Database Pool Configuration
    database_pool_size: int = Field(
        default=10, description="データベース接続プールサイズ"
    )
    database_max_overflow: int = Field(
        default=20, description="最大オーバーフロー接続数"
    )
    database_pool_timeout: int = Field(default=30, description="接続タイムアウト（秒）")

    # CORS Configuration
    cors_allowed_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="許可されたCORSオリジンのリスト",
    )
    cors_allow_credentials: bool = Field(
        default=True,
        description="CORSでクレデンシャル（Cookie、認証ヘッダー）を許可",
    )
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        description="許可されたHTTPメソッド",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        description="許可されたHTTPヘッダー",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """ログレベルのバリデーション。"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("cors_allowed_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """CORSオリジンのバリデーション。"""
        if "*" in v and len(v) > 1:
            raise ValueError(
                "CORS: Cannot use wildcard '*' with other specific origins"
            )
        return v

    @model_validator(mode="after")
    def validate_page_sizes(self) -> "Settings":
        """デフォルト件数が最大件数を超えないことを検証する。"""
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must not exceed max_page_size")
        return self

    @property
    def is_sqlite(self) -> bool:
        """SQLiteを使用しているかを返す。"""
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得する。

    Returns:
        Settings: アプリケーション設定
    """
    return Settings()
