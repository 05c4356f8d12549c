"""Shared column helpers for catalog models."""

from datetime import UTC, datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, validates


def utcnow() -> datetime:
    """Naive UTC timestamp, the form SQLite hands back."""
    return datetime.now(UTC).replace(tzinfo=None)


def normalize_name(name: str) -> str:
    """Key used for case-insensitive name uniqueness."""
    return name.lower()


class UniqueNameMixin:
    """Name column plus a lower-cased ``name_key`` with a UNIQUE constraint.

    The key is kept in sync on every assignment to ``name`` so lookups and
    the database constraint never depend on collation rules.
    """

    name: Mapped[str] = mapped_column(String(255))
    name_key: Mapped[str] = mapped_column(String(255), unique=True, index=True)

    @validates("name")
    def _sync_name_key(self, key: str, value: str) -> str:
        self.name_key = normalize_name(value)
        return value
