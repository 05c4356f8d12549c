"""Roadmap and course category routes."""

from fastapi import APIRouter, status

from quicklearn.api.deps import DBSession
from quicklearn.models import CourseCategory, RoadmapCategory
from quicklearn.schemas import CategoryCreate, CategoryResponse, CategoryUpdate
from quicklearn.services import category_service


def _category_router(model: type[RoadmapCategory] | type[CourseCategory], prefix: str) -> APIRouter:
    """Build the CRUD router for one category kind."""
    router = APIRouter(prefix=prefix, tags=["categories"])

    @router.get("", response_model=list[CategoryResponse])
    async def list_categories(db: DBSession) -> list:
        return await category_service.list_categories(db, model)

    @router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
    async def create_category(data: CategoryCreate, db: DBSession):
        return await category_service.create_category(db, model, data.name)

    @router.get("/{category_id}", response_model=CategoryResponse)
    async def get_category(category_id: int, db: DBSession):
        return await category_service.get_category(db, model, category_id)

    @router.patch("/{category_id}", response_model=CategoryResponse)
    async def update_category(category_id: int, data: CategoryUpdate, db: DBSession):
        return await category_service.update_category(db, model, category_id, data.name)

    @router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_category(category_id: int, db: DBSession) -> None:
        await category_service.delete_category(db, model, category_id)

    return router


roadmap_categories_router = _category_router(RoadmapCategory, "/roadmap-categories")
course_categories_router = _category_router(CourseCategory, "/course-categories")
