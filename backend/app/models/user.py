"""User ORM — persisted user record.

Invariants:
    - id is an autoincrement integer primary key, never reassigned
    - email is UNIQUE at the storage level; duplicates fail on commit
    - gender/seniority stored as DB enums from core/domain_types.py
    - updated_at refreshed by the ORM on every UPDATE
"""

from datetime import datetime, timezone

from sqlalchemy import Enum, Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import Gender, Seniority
from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class User(Base):
    """User record managed through the /users endpoints."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    gender: Mapped[Gender] = mapped_column(
        Enum(Gender, name="gender", values_callable=_enum_values),
        nullable=False,
    )
    seniority: Mapped[Seniority] = mapped_column(
        Enum(Seniority, name="seniority", values_callable=_enum_values),
        nullable=False,
    )
    experience: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
