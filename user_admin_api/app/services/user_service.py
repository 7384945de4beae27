"""
Business logic for users.

The ``UserService`` keeps users in memory and provides the basic CRUD
operations.  Nothing survives a restart.  One instance is created per
application by ``create_app`` and shared by all requests, so every
operation runs under the service lock.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from ..schemas.user import User, UserPayload


logger = logging.getLogger(__name__)


class IdGenerator:
    """Monotonic identifier source starting at 1.  Values are never reused."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value


class UserService:
    """In-memory user store.

    Users are kept in a dict keyed by id; dict ordering preserves
    insertion order for ``list_users``.  Callers always receive copies,
    so a returned user is not affected by later updates to the store.
    Missing users are reported as ``None`` (or ``False`` for deletes)
    rather than by raising.
    """

    def __init__(self, initial_users: Optional[Iterable[UserPayload]] = None) -> None:
        self._users: Dict[int, User] = {}
        self._ids = IdGenerator()
        self._lock = threading.RLock()
        for candidate in initial_users or ():
            self.create_user(candidate)

    def list_users(self) -> List[User]:
        """Return a snapshot of all users in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user is not None else None

    def create_user(self, candidate: UserPayload) -> User:
        """Store a new user under the next identifier and return it.

        The candidate is not validated here; the endpoints reject blank
        names and emails before calling this method.
        """
        with self._lock:
            user = User(
                id=self._ids.next_id(),
                name=candidate.name,
                email=candidate.email,
                role=candidate.role,
            )
            self._users[user.id] = user
            logger.info("Created user %s (%s)", user.id, user.email)
            return user.model_copy()

    def update_user(self, user_id: int, patch: UserPayload) -> Optional[User]:
        """Overwrite name, email and role of an existing user.

        Returns the updated user, or ``None`` if ``user_id`` is unknown.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user.name = patch.name
            user.email = patch.email
            user.role = patch.role
            logger.info("Updated user %s", user_id)
            return user.model_copy()

    def delete_user(self, user_id: int) -> bool:
        with self._lock:
            removed = self._users.pop(user_id, None)
        if removed is None:
            return False
        logger.info("Deleted user %s", user_id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._users)


SAMPLE_USERS = (
    UserPayload(name="John Doe", email="john@example.com", role="USER"),
    UserPayload(name="Jane Smith", email="jane@example.com", role="ADMIN"),
    UserPayload(name="Bob Johnson", email="bob@example.com", role="USER"),
)
