"""Case-insensitive name lookups shared by the catalog services."""

from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quicklearn.core.exceptions import DuplicateName
from quicklearn.core.logging import get_logger
from quicklearn.models.base import normalize_name

logger = get_logger(__name__)

NamedModel = TypeVar("NamedModel")


async def find_by_name(db: AsyncSession, model: type[NamedModel], name: str) -> NamedModel | None:
    """Find a row whose name matches ``name`` ignoring case."""
    result = await db.execute(select(model).where(model.name_key == normalize_name(name)))
    return result.scalar_one_or_none()


async def ensure_name_available(
    db: AsyncSession,
    model: type[NamedModel],
    name: str,
    *,
    label: str,
    exclude_id: int | None = None,
) -> None:
    """Raise DuplicateName if another row already uses ``name``.

    Args:
        db: Database session
        model: Model class carrying ``name_key``
        name: Candidate name
        label: Human-readable entity name for the error message
        exclude_id: Row being renamed; matching itself is not a collision
    """
    existing = await find_by_name(db, model, name)
    if existing is not None and existing.id != exclude_id:
        logger.warning("Name collision", model=model.__name__, name=name, existing_id=existing.id)
        raise DuplicateName(f"{label} with name '{name}' already exists")
