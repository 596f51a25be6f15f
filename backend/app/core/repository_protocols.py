"""Boundary Protocols — contracts between services and persistence.

Invariants:
    - Services depend on UserRepository, never on AsyncSession directly
    - create() and merge() do not persist; only save() and delete() hit the store

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: every implementation does IO
"""

from typing import Any, Protocol

from app.core.domain_types import UserId


class UserLike(Protocol):
    """Structural contract for User objects returned by a repository."""
    id: int
    first_name: str
    last_name: str
    email: str
    experience: str | None


class UserRepository(Protocol):
    """Contract for user persistence — implemented by repositories/."""
    async def find_and_count(
        self, offset: int, limit: int,
    ) -> tuple[list[UserLike], int]: ...
    async def find_one(self, user_id: UserId) -> UserLike | None: ...
    def create(self, data: dict[str, Any]) -> UserLike: ...
    def merge(self, user: UserLike, changes: dict[str, Any]) -> UserLike: ...
    async def save(self, user: UserLike) -> UserLike: ...
    async def delete(self, user_id: UserId) -> int: ...
