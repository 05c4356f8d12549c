"""Per-user lesson completion records."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from quicklearn.core.database import Base
from quicklearn.models.base import utcnow


class UserProgress(Base):
    """One row per (user, lesson) the user has completed.

    Owned by the progress tracker. No ORM relationship to Lesson: catalog
    and progress data are merged by lesson id at read time.
    """

    __tablename__ = "user_progress"
    __table_args__ = (UniqueConstraint("user_id", "lesson_id", name="unique_user_lesson"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    lesson_id: Mapped[int] = mapped_column(ForeignKey("lessons.id", ondelete="CASCADE"))
    completed_date: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
