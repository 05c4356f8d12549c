"""Service layer modules."""

from quicklearn.services import (
    category_service,
    course_service,
    learning_path_service,
    lesson_service,
    naming,
    progress_service,
    roadmap_service,
    user_service,
)

__all__ = [
    "category_service",
    "course_service",
    "learning_path_service",
    "lesson_service",
    "naming",
    "progress_service",
    "roadmap_service",
    "user_service",
]
