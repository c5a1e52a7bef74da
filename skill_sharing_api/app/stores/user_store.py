"""
User store: the persistence collaborator of ``UserService``.

``UserStore`` is the contract the service depends on.  The service
calls ``exists_by_id`` and then ``save``; the two calls are not atomic,
so two concurrent creates for the same new id can both pass the
existence check.  Implementations should reject the second insert with
``DuplicateUserError`` (a unique key does this for free); a store that
upserts instead silently keeps the last write.

``SQLiteUserStore`` keeps each user as one row of the ``users`` table
created by ``core.db.init_db``, with ``following`` stored as JSON text.
"""

import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Optional

from skill_sharing_api.app.core.db import get_connection, get_database_path
from skill_sharing_api.app.schemas.user import UserRecord


class DuplicateUserError(Exception):
    """Raised by ``save`` when a user with the same id is already stored."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} already exists")
        self.user_id = user_id


class UserStore(ABC):
    """Document store keyed by user id."""

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Return the stored user or ``None``.  Not finding one is not an error."""

    @abstractmethod
    def exists_by_id(self, user_id: str) -> bool:
        """Return ``True`` iff a user with this id is stored."""

    @abstractmethod
    def save(self, user: UserRecord) -> None:
        """Insert a new user.

        Raises ``DuplicateUserError`` if the id is taken.  Other
        failures propagate unchanged.
        """


class SQLiteUserStore(UserStore):
    """``UserStore`` backed by a SQLite file.

    A new connection is opened for every call and closed before it
    returns, so one instance can be shared between requests.
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path or get_database_path()

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT id, name, email, role, following FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
            if not row:
                return None
            return UserRecord(
                id=row["id"],
                name=row["name"],
                email=row["email"],
                role=row["role"],
                following=json.loads(row["following"]) if row["following"] else [],
            )
        finally:
            conn.close()

    def exists_by_id(self, user_id: str) -> bool:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute("SELECT 1 FROM users WHERE id = ?", (user_id,)).fetchone()
            return row is not None
        finally:
            conn.close()

    def save(self, user: UserRecord) -> None:
        logger = logging.getLogger(__name__)
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                "INSERT INTO users (id, name, email, role, following) VALUES (?, ?, ?, ?, ?)",
                (
                    user.id,
                    user.name,
                    user.email,
                    user.role.value,
                    json.dumps(user.following),
                ),
            )
            conn.commit()
            logger.debug("Stored user %s", user.id)
        except sqlite3.IntegrityError as e:
            conn.rollback()
            # Primary key conflict: another request created this id first
            if "UNIQUE" in str(e) or "PRIMARY KEY" in str(e):
                raise DuplicateUserError(user.id) from e
            raise
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
