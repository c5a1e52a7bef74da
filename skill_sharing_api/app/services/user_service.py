"""
Business logic for users.

``UserService`` validates create payloads, keeps creation idempotent
and maps between the API representation and the stored document.  It
holds no state of its own between requests: the store and the logger
are handed to it by the application factory (or by a test).
"""

import logging
from typing import Any, Mapping, Optional, Tuple

from ..schemas.user import Role, UserCreateResult, UserRecord, UserView
from ..stores.user_store import DuplicateUserError, UserStore
from .errors import UserNotFoundError, UserStoreError, UserValidationError


# The only payload fields copied into a new user.  Everything else the
# caller sends, ``role`` and ``following`` included, is dropped so a
# create request cannot grant itself privileges.
ALLOWED_CREATE_FIELDS: Tuple[str, ...] = ("id", "name", "email")

# Checked in this order; the first failure is reported.
REQUIRED_FIELD_MESSAGES: Tuple[Tuple[str, str], ...] = (
    ("id", "User ID is required"),
    ("name", "User name is required"),
    ("email", "User email is required"),
)


def _field_as_text(value: Any) -> Optional[str]:
    """Return a JSON scalar as a string, or ``None`` if it cannot be one.

    Numbers become their decimal text.  Booleans, lists, objects and
    ``null`` count as missing, so ``{"id": true}`` is rejected rather
    than stored under the id ``"true"``.
    """
    if isinstance(value, str):
        return value
    # JSON numbers are accepted as identifiers; booleans are not numbers here
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class UserService:
    """Сервис для работы с пользователями.

    Создание пользователя идемпотентно: повторный запрос с тем же
    ``id`` ничего не перезаписывает и не считается ошибкой.
    """

    def __init__(self, store: UserStore, logger: Optional[logging.Logger] = None) -> None:
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    async def get_user(self, user_id: str) -> UserView:
        """Retrieve a user by ID.

        Raises ``UserNotFoundError`` when the user is absent and also when
        the lookup fails for any other reason.  In the latter case the
        error is logged here and its detail is not passed on.
        """
        self.logger.info("Getting user with id: %s", user_id)
        try:
            record = self.store.find_by_id(user_id)
        except Exception:
            self.logger.exception("Error getting user: %s", user_id)
            raise UserNotFoundError(user_id) from None
        if record is None:
            self.logger.info("User not found: %s", user_id)
            raise UserNotFoundError(user_id)
        return UserView(id=record.id, name=record.name, email=record.email)

    async def create_user(self, payload: Mapping[str, Any]) -> UserCreateResult:
        """Create a user from a raw request payload.

        Returns a result with ``created=False`` if the id is already
        taken, without touching the stored user.  Raises
        ``UserValidationError`` for a missing field and
        ``UserStoreError`` when the store fails to persist the user.
        Failures of the existence check propagate unchanged.
        """
        fields = self._validate(payload)
        user_id, name = fields["id"], fields["name"]

        if self.store.exists_by_id(user_id):
            self.logger.info("User already exists: %s", user_id)
            return UserCreateResult(created=False, id=user_id, name=name)

        user = self._build_new_user(fields)
        try:
            self.store.save(user)
        except DuplicateUserError:
            # A concurrent request inserted the same id after our check
            self.logger.info("User already exists: %s", user_id)
            return UserCreateResult(created=False, id=user_id, name=name)
        except Exception as e:
            self.logger.exception("Error saving user to database: %s", e)
            raise UserStoreError(str(e)) from e

        self.logger.info("User created successfully: %s", user.id)
        return UserCreateResult(created=True, id=user.id, name=user.name)

    def _validate(self, payload: Mapping[str, Any]) -> dict:
        """Return the allowed fields as non-empty strings or raise on the first gap."""
        fields = {key: _field_as_text(payload.get(key)) for key in ALLOWED_CREATE_FIELDS}
        self.logger.info(
            "Creating user with data - id: %s, name: %s, email: %s",
            fields["id"], fields["name"], fields["email"],
        )
        for key, message in REQUIRED_FIELD_MESSAGES:
            if not fields[key]:
                self.logger.warning("User %s is missing", key)
                raise UserValidationError(message)
        return fields

    @staticmethod
    def _build_new_user(fields: Mapping[str, str]) -> UserRecord:
        """Allow-list construction: only ``ALLOWED_CREATE_FIELDS`` reach the record."""
        return UserRecord(
            **{key: fields[key] for key in ALLOWED_CREATE_FIELDS},
            role=Role.USER,
            following=[],
        )
