"""Roadmap schemas for API requests and responses."""

from datetime import datetime

from pydantic import BaseModel, Field

from quicklearn.schemas.category import CategoryResponse


class RoadmapCreate(BaseModel):
    """Create a new roadmap."""

    name: str = Field(min_length=1, max_length=255)
    description: str = Field(default="", max_length=5000)
    roadmap_category_id: int


class RoadmapUpdate(BaseModel):
    """Update an existing roadmap."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=5000)
    roadmap_category_id: int | None = None
    achieved: bool | None = None


class RoadmapSummary(BaseModel):
    """Roadmap reference embedded in course responses."""

    id: int
    name: str

    class Config:
        from_attributes = True


class RoadmapResponse(BaseModel):
    """Roadmap response."""

    id: int
    name: str
    description: str
    roadmap_category_id: int
    created_by_user_id: int
    achieved: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RoadmapCourse(BaseModel):
    """Course reference embedded in roadmap details."""

    id: int
    name: str
    course_category_id: int

    class Config:
        from_attributes = True


class RoadmapDetailResponse(RoadmapResponse):
    """Roadmap with its category and courses."""

    roadmap_category: CategoryResponse
    courses: list[RoadmapCourse]
