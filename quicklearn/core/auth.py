"""Authentication utilities.

This module provides a simple authentication system that defaults to
a guest user (``DEFAULT_USER_ID``). Catalog writes and progress records
take the requester as an explicit argument, so swapping in real auth only
touches this module.

WARNING: This is a placeholder implementation for development only.
Always returns the configured guest user id.
"""

from typing import Annotated

from fastapi import Depends, Request

from quicklearn.core.config import get_settings


def get_auth_user(request: Request) -> int:
    """Get the current authenticated user ID for HTTP requests.

    Args:
        request: HTTP request object (injected by FastAPI)

    Returns:
        User ID (int)

    Example:
        @router.post("/courses")
        async def create_course(user_id: Annotated[int, Depends(get_auth_user)]):
            return {"user_id": user_id}
    """
    return get_settings().DEFAULT_USER_ID


# Type alias for FastAPI dependency
CurrentUserDep = Annotated[int, Depends(get_auth_user)]
