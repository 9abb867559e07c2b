"""
FastAPI dependencies for the application.

Request-scoped collaborators are built from the session maker the
application lifespan stores on app.state; nothing reaches for a global.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.repositories.list_repository import ListRepository
from app.services.list_service import ListService


def get_session_maker(request: Request) -> async_sessionmaker[AsyncSession]:
    """The session maker created at start-up."""
    return request.app.state.session_maker


async def get_db(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session."""
    async with session_maker() as session:
        yield session


def get_list_repository(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> ListRepository:
    return ListRepository(session_maker)


def get_list_service(
    repository: ListRepository = Depends(get_list_repository),
) -> ListService:
    return ListService(repository)
