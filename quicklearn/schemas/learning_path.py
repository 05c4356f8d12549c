"""Read models combining catalog data with a user's progress."""

from datetime import datetime

from pydantic import BaseModel

from quicklearn.schemas.course import CourseResponse
from quicklearn.schemas.roadmap import RoadmapResponse


class LessonStatus(BaseModel):
    """A lesson and whether the user completed it."""

    id: int
    name: str
    content: str
    is_completed: bool
    completed_date: datetime | None = None


class CourseProgressView(BaseModel):
    """Course with per-lesson status and completion percentage."""

    course: CourseResponse
    total_lessons: int
    completed_count: int
    percentage: int  # 0 to 100
    lessons: list[LessonStatus]


class CourseProgressSummary(BaseModel):
    """Completion figures for one course of a roadmap."""

    course_id: int
    name: str
    total_lessons: int
    completed_count: int
    percentage: int


class RoadmapProgressView(BaseModel):
    """Roadmap with overall and per-course completion."""

    roadmap: RoadmapResponse
    total_lessons: int
    completed_count: int
    percentage: int
    courses: list[CourseProgressSummary]
