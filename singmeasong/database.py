"""Async SQLAlchemy engine and session management."""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from singmeasong.config import settings
from singmeasong.domain.models import Base

logger = logging.getLogger(__name__)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


engine = create_async_engine(settings.database_url)
async_session_factory = build_session_factory(engine)


async def create_schema(target: AsyncEngine = engine) -> None:
    """Create missing tables. Alembic owns migrations beyond the first run."""
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")
