"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..infrastructure.config import configure_logging, get_settings
from ..infrastructure.database.connection import db_manager, init_database
from .api.v1 import v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """アプリケーションのライフサイクル管理。

    Args:
        app: FastAPIアプリケーション

    Yields:
        None
    """
    # 起動時の処理
    settings = get_settings()
    configure_logging(settings)
    if settings.user_store == "sql":
        await init_database()
    logger.info("User service started (store=%s)", settings.user_store)

    yield

    # 終了時の処理
    await db_manager.close()


app = FastAPI(
    title="User Service API",
    description="User management CRUD API",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.include_router(v1_router, prefix="/api")


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "User Service API", "version": "0.1.0"}


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


def main() -> None:
    """開発用にuvicornでアプリケーションを起動する。"""
    settings = get_settings()
    uvicorn.run(
        "src.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
