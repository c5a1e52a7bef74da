"""Shared fixtures: store doubles and a test client wired to them."""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from skill_sharing_api.app.main import create_app
from skill_sharing_api.app.schemas.user import UserRecord
from skill_sharing_api.app.services.user_service import UserService
from skill_sharing_api.app.stores.user_store import DuplicateUserError, UserStore


class InMemoryUserStore(UserStore):
    """Dict-backed store that records every saved user."""

    def __init__(self) -> None:
        self.users: Dict[str, UserRecord] = {}
        self.saved: List[UserRecord] = []

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self.users.get(user_id)

    def exists_by_id(self, user_id: str) -> bool:
        return user_id in self.users

    def save(self, user: UserRecord) -> None:
        if user.id in self.users:
            raise DuplicateUserError(user.id)
        self.saved.append(user)
        self.users[user.id] = user


class FailingUserStore(InMemoryUserStore):
    """Store whose operations raise on demand."""

    def __init__(self, *, fail_find=False, fail_exists=False, fail_save=False) -> None:
        super().__init__()
        self.fail_find = fail_find
        self.fail_exists = fail_exists
        self.fail_save = fail_save

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        if self.fail_find:
            raise ConnectionError("connection refused")
        return super().find_by_id(user_id)

    def exists_by_id(self, user_id: str) -> bool:
        if self.fail_exists:
            raise RuntimeError("cursor closed")
        return super().exists_by_id(user_id)

    def save(self, user: UserRecord) -> None:
        if self.fail_save:
            raise IOError("disk full")
        super().save(user)


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def service(store):
    return UserService(store)


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))
