"""Pydantic schemas."""

from quicklearn.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from quicklearn.schemas.course import (
    CourseCreate,
    CourseDetailResponse,
    CourseResponse,
    CourseUpdate,
)
from quicklearn.schemas.learning_path import (
    CourseProgressSummary,
    CourseProgressView,
    LessonStatus,
    RoadmapProgressView,
)
from quicklearn.schemas.lesson import LessonCreate, LessonResponse, LessonUpdate
from quicklearn.schemas.progress import (
    CompletionRequest,
    CourseProgressGroup,
    LessonCompletion,
    ProgressResponse,
    ProgressRow,
)
from quicklearn.schemas.roadmap import (
    RoadmapCourse,
    RoadmapCreate,
    RoadmapDetailResponse,
    RoadmapResponse,
    RoadmapSummary,
    RoadmapUpdate,
)

__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "RoadmapCreate",
    "RoadmapUpdate",
    "RoadmapResponse",
    "RoadmapDetailResponse",
    "RoadmapSummary",
    "RoadmapCourse",
    "CourseCreate",
    "CourseUpdate",
    "CourseResponse",
    "CourseDetailResponse",
    "LessonCreate",
    "LessonUpdate",
    "LessonResponse",
    "CompletionRequest",
    "ProgressResponse",
    "ProgressRow",
    "LessonCompletion",
    "CourseProgressGroup",
    "LessonStatus",
    "CourseProgressView",
    "CourseProgressSummary",
    "RoadmapProgressView",
]
