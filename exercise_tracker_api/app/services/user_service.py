"""
Business logic for users.

Usernames are unique: registering a name that already exists returns
the existing user instead of creating a duplicate.
"""

import logging
import sqlite3
from typing import List

from exercise_tracker_api.app.core.db import Store
from exercise_tracker_api.app.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Registers and lists users."""

    def __init__(self, store: Store) -> None:
        self.store = store

    @staticmethod
    def _row_to_user_read(row: sqlite3.Row) -> UserRead:
        return UserRead(id=row["id"], username=row["username"])

    async def create_user(self, data: UserCreate) -> UserRead:
        """Return the user named ``data.username``, creating it if needed."""
        existing = self.store.find_user_by_username(data.username)
        if existing:
            logger.debug("User %s already exists", data.username)
            return self._row_to_user_read(existing)
        try:
            row = self.store.insert_user(data.username)
        except sqlite3.IntegrityError:
            # Another request registered the same name in between.
            row = self.store.find_user_by_username(data.username)
            if row is None:
                raise
        else:
            logger.info("Registered user %s (%s)", row["username"], row["id"])
        return self._row_to_user_read(row)

    async def list_users(self) -> List[UserRead]:
        """Return every user in registration order."""
        return [self._row_to_user_read(row) for row in self.store.list_users()]
