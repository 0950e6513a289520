"""ロギング設定。"""

import logging
import sys

from .settings import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """アプリケーション全体のロギングを設定する。

    Args:
        settings: アプリケーション設定
    """
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    # SQLAlchemyのSQLログはdebug時のみ出力する
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )


def get_logger(name: str) -> logging.Logger:
    """ユースケースに注入するロガーを取得する。

    Args:
        name: ロガー名

    Returns:
        logging.Logger: ロガー
    """
    return logging.getLogger(name)
