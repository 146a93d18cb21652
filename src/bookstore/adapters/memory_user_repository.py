"""In-memory user repository."""

import threading
from dataclasses import dataclass, field

from bookstore.domain.models import UserRecord
from bookstore.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """Append-only list of registered users."""

    users: list[UserRecord] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_by_username(self, username: str) -> UserRecord | None:
        for user in self.users:
            if user.username == username:
                return user
        return None

    def add_if_absent(self, user: UserRecord) -> bool:
        with self._lock:
            if self.get_by_username(user.username) is not None:
                return False
            self.users.append(user)
            return True
