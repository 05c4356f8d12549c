"""API dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from quicklearn.core.auth import get_auth_user
from quicklearn.core.database import get_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Database dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]

# Auth user dependency - returns the requester's user_id
CurrentUser = Annotated[int, Depends(get_auth_user)]
