from __future__ import annotations

import logging
import threading
from typing import Dict, List

from user_api.errors import BadRequest, Conflict, NotFound
from user_api.models import MAX_USER_ID, UserRecord

logger = logging.getLogger("user_api")

_REQUIRED_ON_UPDATE = ("username", "password", "name")


def parse_user_id(raw: str) -> int:
    """Parse an identifier taken from a request path.

    Only plain decimal digits in ``0 .. MAX_USER_ID`` are accepted; signs,
    whitespace and anything out of range are rejected with ``BadRequest``.
    """
    s = raw or ""
    if not (s.isascii() and s.isdigit()):
        raise BadRequest("Invalid ID, must be a positive integer")
    value = int(s)
    if value > MAX_USER_ID:
        raise BadRequest("Invalid ID, must be a positive integer")
    return value


class InMemoryUserStore:
    """Thread-safe in-memory user store.

    Storage semantics:
    - Stored only in the API process memory (cleared on restart).
    - Not shared across multiple API instances or across store objects.
    - Every operation, reads included, runs under one exclusive lock held only
      for the dictionary access.

    Records handed in are copied before they are stored and records handed out
    are copies, so callers can never mutate stored state outside the lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[int, UserRecord] = {}

    def create(self, record: UserRecord) -> UserRecord:
        # Only the id is checked here; other fields are accepted as-is.
        if record.id == 0:
            raise BadRequest("ID must be greater than 0")
        stored = record.model_copy()
        with self._lock:
            if stored.id in self._users:
                raise Conflict("User with this ID already exists")
            self._users[stored.id] = stored
        logger.info("Created user id=%s", stored.id)
        return stored.model_copy()

    def get(self, user_id: int) -> UserRecord:
        with self._lock:
            stored = self._users.get(user_id)
        if stored is None:
            raise NotFound("User not found")
        logger.debug("Fetched user id=%s", user_id)
        return stored.model_copy()

    def list(self) -> List[UserRecord]:
        with self._lock:
            snapshot = list(self._users.values())
        return [u.model_copy() for u in snapshot]

    def update(self, user_id: int, record: UserRecord) -> UserRecord:
        """Replace the whole record stored under ``user_id``.

        ``record.id`` may be 0 (take the path id) or equal to ``user_id``.
        Fields missing from ``record`` are not merged from the stored copy.
        """
        if record.id != 0 and record.id != user_id:
            raise BadRequest("ID in request body does not match ID in URL")
        for field in _REQUIRED_ON_UPDATE:
            if not getattr(record, field):
                raise BadRequest(f"{field.capitalize()} is required")

        replacement = record.model_copy(update={"id": user_id})
        with self._lock:
            if user_id not in self._users:
                raise NotFound("User not found")
            self._users[user_id] = replacement
        logger.info("Updated user id=%s", user_id)
        return replacement.model_copy()

    def delete(self, user_id: int) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise NotFound("User not found")
        logger.info("Deleted user id=%s", user_id)

    def count(self) -> int:
        with self._lock:
            return len(self._users)
