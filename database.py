"""Database wiring for the Movies API.

One async engine is built from ``config.DATABASE_URL`` and shared by the
request-scoped sessions handed to the users and movies routes through
:func:`get_db`. :func:`create_tables` creates the ``users`` and ``movies``
tables on startup; schema changes after that go through Alembic.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy import orm
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

import config

engine = create_async_engine(config.DATABASE_URL, echo=config.SQL_ECHO)

AsyncSessionLocal: sessionmaker = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

Base = orm.declarative_base()


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create every mapped table that does not exist yet."""
    # models registers User and Movie on Base.metadata
    import models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request; it is closed when the request ends."""
    async with AsyncSessionLocal() as session:
        yield session
