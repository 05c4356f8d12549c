"""Roadmap and course category CRUD."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from quicklearn.core.exceptions import CategoryInUse, CategoryNotFound
from quicklearn.core.logging import get_logger
from quicklearn.models import Course, CourseCategory, Roadmap, RoadmapCategory
from quicklearn.services.naming import ensure_name_available

logger = get_logger(__name__)

CategoryModel = type[RoadmapCategory] | type[CourseCategory]

# Category kind -> column of the rows that reference it
_REFERENCING_COLUMNS = {
    RoadmapCategory: Roadmap.roadmap_category_id,
    CourseCategory: Course.course_category_id,
}


def _label(model: CategoryModel) -> str:
    return "Roadmap category" if model is RoadmapCategory else "Course category"


async def create_category(
    db: AsyncSession, model: CategoryModel, name: str
) -> RoadmapCategory | CourseCategory:
    """Create a category; names are unique per kind, ignoring case."""
    await ensure_name_available(db, model, name, label=_label(model))

    category = model(name=name)
    db.add(category)
    await db.flush()

    logger.info("Category created", kind=model.__tablename__, category_id=category.id)
    return category


async def get_category(
    db: AsyncSession, model: CategoryModel, category_id: int
) -> RoadmapCategory | CourseCategory:
    category = await db.get(model, category_id)
    if not category:
        raise CategoryNotFound(f"{_label(model)} {category_id} not found")
    return category


async def list_categories(
    db: AsyncSession, model: CategoryModel
) -> list[RoadmapCategory | CourseCategory]:
    result = await db.execute(select(model).order_by(model.name_key))
    return list(result.scalars().all())


async def update_category(
    db: AsyncSession, model: CategoryModel, category_id: int, name: str | None
) -> RoadmapCategory | CourseCategory:
    """Rename a category. Renaming to its own name (any casing) is allowed."""
    category = await get_category(db, model, category_id)
    if name is not None:
        await ensure_name_available(
            db, model, name, label=_label(model), exclude_id=category.id
        )
        category.name = name
        await db.flush()
        logger.info("Category updated", kind=model.__tablename__, category_id=category_id)
    return category


async def delete_category(db: AsyncSession, model: CategoryModel, category_id: int) -> None:
    """Delete a category that nothing references.

    Raises:
        CategoryNotFound: unknown id
        CategoryInUse: roadmaps or courses still point at the category
    """
    category = await get_category(db, model, category_id)

    column = _REFERENCING_COLUMNS[model]
    result = await db.execute(select(func.count()).where(column == category.id))
    in_use = result.scalar_one()
    if in_use:
        logger.warning(
            "Refusing to delete category in use",
            kind=model.__tablename__,
            category_id=category_id,
            references=in_use,
        )
        raise CategoryInUse(f"{_label(model)} is used by {in_use} item(s)")

    await db.delete(category)
    await db.flush()
    logger.info("Category deleted", kind=model.__tablename__, category_id=category_id)
