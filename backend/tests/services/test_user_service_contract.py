"""User Service contract — service logic against an in-memory UserRepository.

Verifies the service only needs the repository Protocol: offsets, merge
semantics and delete counts come from the fake, not from SQLAlchemy.
"""

from types import SimpleNamespace

import pytest

from app.core.errors import ResourceNotFoundError
from app.schemas.pagination import PaginationParams
from app.services.user_service import UserService


class InMemoryUserRepository:
    def __init__(self):
        self.rows: dict[int, SimpleNamespace] = {}
        self.calls: list[tuple] = []
        self._next_id = 1

    async def find_and_count(self, offset, limit):
        self.calls.append(("find_and_count", offset, limit))
        ordered = [self.rows[k] for k in sorted(self.rows)]
        return ordered[offset:offset + limit], len(ordered)

    async def find_one(self, user_id):
        return self.rows.get(user_id)

    def create(self, data):
        return SimpleNamespace(id=None, **data)

    def merge(self, user, changes):
        for key, value in changes.items():
            setattr(user, key, value)
        return user

    async def save(self, user):
        if user.id is None:
            user.id = self._next_id
            self._next_id += 1
        self.rows[user.id] = user
        return user

    async def delete(self, user_id):
        return 1 if self.rows.pop(user_id, None) else 0


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(repo):
    return UserService(repo)


async def test_find_all_translates_page_to_offset(service, repo):
    for i in range(30):
        await service.create({"email": f"u{i}@mail.com"})
    await service.find_all(PaginationParams(page=3, size=10))
    assert repo.calls[-1] == ("find_and_count", 20, 10)


async def test_update_merges_into_loaded_entity(service, repo):
    user = await service.create({"first_name": "A", "email": "a@mail.com"})
    await service.update(user.id, {"first_name": "B"})
    assert repo.rows[user.id].first_name == "B"
    assert repo.rows[user.id].email == "a@mail.com"


async def test_remove_zero_affected_is_not_found(service):
    with pytest.raises(ResourceNotFoundError):
        await service.remove(42)
