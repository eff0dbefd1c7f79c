"""
Database wiring: one async engine per process, sessions per request.

Routes receive an ``AsyncSession`` through ``get_db``; scripts use
``get_db_session`` and the ``create_tables`` / ``drop_tables`` helpers.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from config import DATABASE_URL, DB_ECHO


if not DATABASE_URL:
    raise ValueError("DATABASE_URL is not set in the environment.")


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    options = {"echo": echo}
    # Server databases drop idle connections; SQLite files never do.
    if make_url(url).get_backend_name() != "sqlite":
        options.update(pool_pre_ping=True, pool_size=5, max_overflow=10)
    return create_async_engine(url, **options)


async_engine = build_engine(DATABASE_URL, echo=DB_ECHO)

async_session_maker = async_sessionmaker(
    async_engine, expire_on_commit=False, class_=AsyncSession
)

metadata = MetaData()
Base = declarative_base(metadata=metadata)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        yield session


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        yield session


async def create_tables(engine: AsyncEngine = async_engine) -> None:
    import db.models  # noqa: F401  registers every table on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables(engine: AsyncEngine = async_engine) -> list[str]:
    import db.models  # noqa: F401

    names = [table.name for table in reversed(Base.metadata.sorted_tables)]
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    return names
