"""Database session dependency."""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from bank_account_service.core.container import ApplicationContainer


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    container = get_container(request)
    async with container.database.session() as session:
        yield session


__all__ = [
    "get_container",
    "get_db_session",
]
