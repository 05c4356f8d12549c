"""User bootstrap helpers."""

from sqlalchemy.ext.asyncio import AsyncSession

from quicklearn.core.exceptions import UnknownUser
from quicklearn.core.logging import get_logger
from quicklearn.models import User

logger = get_logger(__name__)


async def ensure_user(db: AsyncSession, user_id: int) -> User:
    """Return the user with ``user_id``, creating an empty profile if missing.

    Used at startup for the guest user that placeholder auth hands out.
    """
    user = await db.get(User, user_id)
    if user is None:
        user = User(id=user_id)
        db.add(user)
        await db.flush()
        logger.info("User created", user_id=user_id)
    return user


async def require_user(db: AsyncSession, user_id: int) -> User:
    """Return the user with ``user_id``.

    Raises:
        UnknownUser: no such user; rows stamped with this id would break the FK
    """
    user = await db.get(User, user_id)
    if user is None:
        logger.warning("Unknown user", user_id=user_id)
        raise UnknownUser(f"User {user_id} does not exist")
    return user
