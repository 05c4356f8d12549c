"""Roadmap API routes."""

from fastapi import APIRouter, status

from quicklearn.api.deps import CurrentUser, DBSession
from quicklearn.schemas.roadmap import (
    RoadmapCreate,
    RoadmapDetailResponse,
    RoadmapResponse,
    RoadmapUpdate,
)
from quicklearn.services import roadmap_service

router = APIRouter(prefix="/roadmaps", tags=["roadmaps"])


@router.get("", response_model=list[RoadmapResponse])
async def list_roadmaps(db: DBSession, category_id: int | None = None) -> list:
    """List roadmaps, optionally filtered by category."""
    return await roadmap_service.list_roadmaps(db, roadmap_category_id=category_id)


@router.post("", response_model=RoadmapResponse, status_code=status.HTTP_201_CREATED)
async def create_roadmap(data: RoadmapCreate, db: DBSession, user_id: CurrentUser):
    """Create a new roadmap."""
    return await roadmap_service.create_roadmap(
        db,
        requester_id=user_id,
        name=data.name,
        roadmap_category_id=data.roadmap_category_id,
        description=data.description,
    )


@router.get("/{roadmap_id}", response_model=RoadmapDetailResponse)
async def get_roadmap(roadmap_id: int, db: DBSession):
    """Get a roadmap with its category and courses."""
    return await roadmap_service.get_roadmap_details(db, roadmap_id)


@router.patch("/{roadmap_id}", response_model=RoadmapResponse)
async def update_roadmap(roadmap_id: int, data: RoadmapUpdate, db: DBSession):
    """Update a roadmap (admin edits)."""
    return await roadmap_service.update_roadmap(db, roadmap_id, data)


@router.delete("/{roadmap_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_roadmap(roadmap_id: int, db: DBSession) -> None:
    await roadmap_service.delete_roadmap(db, roadmap_id)


@router.post("/{roadmap_id}/courses/{course_id}", response_model=RoadmapDetailResponse)
async def link_course(roadmap_id: int, course_id: int, db: DBSession):
    """Add an existing course to a roadmap."""
    return await roadmap_service.link_course(db, roadmap_id, course_id)


@router.delete("/{roadmap_id}/courses/{course_id}", response_model=RoadmapDetailResponse)
async def unlink_course(roadmap_id: int, course_id: int, db: DBSession):
    """Remove a course from a roadmap without deleting it."""
    return await roadmap_service.unlink_course(db, roadmap_id, course_id)
