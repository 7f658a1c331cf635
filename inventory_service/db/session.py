from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from inventory_service.core.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the process-wide engine; its connection pool is owned by SQLAlchemy."""
    return create_async_engine(settings.sqlalchemy_database_uri, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )


async def get_db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """Provide a session for one request; the connection goes back to the pool afterwards."""
    async with session_factory() as session:
        yield session
