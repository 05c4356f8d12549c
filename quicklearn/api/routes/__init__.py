"""API routes."""

from quicklearn.api.routes import categories, courses, learning_path, lessons, progress, roadmaps

__all__ = ["categories", "courses", "learning_path", "lessons", "progress", "roadmaps"]
