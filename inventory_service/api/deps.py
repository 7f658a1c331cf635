from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.db.session import get_db
from inventory_service.services.file_store import FileStore


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields a database session from the app's pool."""
    async for session in get_db(request.app.state.session_factory):
        yield session


def get_file_store(request: Request) -> FileStore:
    return request.app.state.file_store
