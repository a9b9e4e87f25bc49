"""
Async SQLAlchemy engine and session factory.

Defaults to SQLite via ``aiosqlite``; point ``DATABASE_URL`` at a
``postgresql+asyncpg://`` URL to run against PostgreSQL, in which case the
pool is sized from settings.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.config import settings


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    kwargs = {"echo": echo}
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
        )
    return create_async_engine(url, **kwargs)


engine = build_engine(settings.database_url, echo=settings.database_echo)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


async def create_tables() -> None:
    # Import so the model is registered on Base.metadata
    from . import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
