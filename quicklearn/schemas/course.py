"""Course schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from quicklearn.schemas.category import CategoryResponse
from quicklearn.schemas.lesson import LessonResponse
from quicklearn.schemas.roadmap import RoadmapSummary


class CourseCreate(BaseModel):
    """Create a course; it is linked to ``roadmap_id`` on creation."""

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    course_category_id: int
    roadmap_id: int


class CourseUpdate(BaseModel):
    """Partial course update. Omitted fields keep their stored values."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    course_category_id: int | None = None


class CourseResponse(BaseModel):
    """Course response."""

    id: int
    name: str
    description: str | None
    course_category_id: int
    created_by_user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CourseDetailResponse(CourseResponse):
    """Course with category, roadmaps and lessons."""

    course_category: CategoryResponse
    roadmaps: list[RoadmapSummary]
    lessons: list[LessonResponse]
