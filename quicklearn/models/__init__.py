"""Database models."""

from quicklearn.models.category import CourseCategory, RoadmapCategory
from quicklearn.models.course import Course
from quicklearn.models.lesson import Lesson
from quicklearn.models.progress import UserProgress
from quicklearn.models.roadmap import Roadmap, roadmap_courses
from quicklearn.models.user import User

__all__ = [
    "User",
    "RoadmapCategory",
    "CourseCategory",
    "Roadmap",
    "roadmap_courses",
    "Course",
    "Lesson",
    "UserProgress",
]
