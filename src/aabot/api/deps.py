"""FastAPI dependency injection for DB sessions and repositories."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from aabot.configuration.repository import ConfigRepository
from aabot.db.session import get_session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session for request handling."""
    factory = get_session_factory()
    async with factory() as session:
        yield session


def get_config_repository(db: AsyncSession = Depends(get_db)) -> ConfigRepository:
    return ConfigRepository(db)
