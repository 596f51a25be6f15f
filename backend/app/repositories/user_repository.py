"""SQLAlchemy User Repository — find/count/create/merge/save/delete over AsyncSession.

Invariants:
    - find_and_count orders by id ascending so pages are stable
    - create() and merge() only touch the in-memory instance
    - save() commits and refreshes, so generated id and timestamps are loaded
    - delete() returns the affected row count (0 when the id does not exist)
"""

from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import UserId
from app.models.user import User


class SqlAlchemyUserRepository:
    """UserRepository backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_and_count(
        self, offset: int, limit: int,
    ) -> tuple[list[User], int]:
        total = await self.db.scalar(select(func.count()).select_from(User))
        result = await self.db.execute(
            select(User).order_by(User.id.asc()).offset(offset).limit(limit),
        )
        return list(result.scalars().all()), total or 0

    async def find_one(self, user_id: UserId) -> User | None:
        return await self.db.get(User, user_id)

    def create(self, data: dict[str, Any]) -> User:
        return User(**data)

    def merge(self, user: User, changes: dict[str, Any]) -> User:
        for field, value in changes.items():
            setattr(user, field, value)
        return user

    async def save(self, user: User) -> User:
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def delete(self, user_id: UserId) -> int:
        result = await self.db.execute(delete(User).where(User.id == user_id))
        await self.db.commit()
        return result.rowcount
