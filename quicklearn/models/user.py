"""User model."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from quicklearn.core.database import Base
from quicklearn.models.base import utcnow


class User(Base):
    """Catalog author or learner (all profile fields optional)."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str | None] = mapped_column(String, unique=True)
    email: Mapped[str | None] = mapped_column(String, unique=True)

    # Metadata
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
