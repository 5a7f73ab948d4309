"""Dependency injection for FastAPI routes."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from waitlist.core.database import get_async_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Alias for get_async_session so routes and tests share one override point."""
    async for session in get_async_session():
        yield session


# Database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]


__all__ = [
    "DBSession",
    "get_db",
]
