"""In-memory implementation of UserRepository for testing."""

import copy
import uuid
from datetime import datetime, timezone
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, username: str) -> User | None:
        if any(u.username == username for u in self.store.values()):
            return None

        now = datetime.now(timezone.utc)
        user = User(
            id=uuid.uuid4().hex,
            username=username,
            created_at=now,
            updated_at=now,
        )
        self.store[user.id] = user
        return copy.deepcopy(user)

    def save(self, user: User) -> bool:
        stored = self.store.get(user.id)
        if stored is None or stored.version != user.version:
            return False

        user.version += 1
        user.updated_at = datetime.now(timezone.utc)
        self.store[user.id] = copy.deepcopy(user)
        return True

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, user_id: str) -> User | None:
        user = self.store.get(user_id)
        return copy.deepcopy(user) if user else None

    def get_by_username(self, username: str) -> User | None:
        for user in self.store.values():
            if user.username == username:
                return copy.deepcopy(user)
        return None
