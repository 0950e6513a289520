#!/usr/bin/env python
"""usersテーブルを作成するスクリプト。

DATABASE_URLで指定されたデータベースに対してテーブルを作成する。
既に存在するテーブルには何もしない。
"""

import asyncio
import logging
import sys
from pathlib import Path

# プロジェクトのルートディレクトリをPythonパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.infrastructure.config import configure_logging, get_settings
from src.infrastructure.database import db_manager, init_database

logger = logging.getLogger("init_db")


async def main() -> int:
    """データベースを初期化する。"""
    settings = get_settings()
    configure_logging(settings)
    logger.info("Creating tables on %s", settings.database_url)

    try:
        await init_database()
    except Exception:
        logger.exception("Failed to initialize the database")
        return 1
    finally:
        await db_manager.close()

    logger.info("Database initialized")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
