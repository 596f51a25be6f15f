"""User Service — CRUD and paginated listing for users.

Invariants:
    - find_all returns users ascending by id with {page, size, total, total_pages}
    - find_all raises PageOutOfRangeError when page exceeds total pages (total > 0)
    - find_one/update/remove raise ResourceNotFoundError("User", id) for missing ids
    - update applies only the fields present in `changes`
"""

import logging
from typing import Any

from app.core.domain_types import UserId
from app.core.errors import PageOutOfRangeError, ResourceNotFoundError
from app.core.pagination import calculate_pagination, page_offset
from app.core.repository_protocols import UserLike, UserRepository
from app.schemas.pagination import PaginationParams

logger = logging.getLogger(__name__)


class UserService:
    """Thin composition of repository calls and existence checks."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def find_all(self, params: PaginationParams | None = None) -> dict:
        params = params or PaginationParams()
        users, total = await self.repository.find_and_count(
            offset=page_offset(params.page, params.size), limit=params.size,
        )
        try:
            meta = calculate_pagination(total, params.page, params.size)
        except PageOutOfRangeError:
            logger.warning(
                "Requested page past the end",
                extra={"page": params.page, "size": params.size},
            )
            raise
        return {"data": users, "meta": meta}

    async def find_one(self, user_id: UserId) -> UserLike:
        user = await self.repository.find_one(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user

    async def create(self, data: dict[str, Any]) -> UserLike:
        user = await self.repository.save(self.repository.create(data))
        logger.info("User created", extra={"user_id": user.id})
        return user

    async def update(self, user_id: UserId, changes: dict[str, Any]) -> UserLike:
        user = await self.find_one(user_id)
        user = await self.repository.save(self.repository.merge(user, changes))
        logger.info("User updated", extra={"user_id": user_id})
        return user

    async def remove(self, user_id: UserId) -> dict:
        affected = await self.repository.delete(user_id)
        if affected == 0:
            raise ResourceNotFoundError("User", user_id)
        logger.info("User deleted", extra={"user_id": user_id})
        return {"success": True}
