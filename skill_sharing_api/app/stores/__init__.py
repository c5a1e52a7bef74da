"""
Persistence collaborators.

Services depend on the abstract store contracts defined here and never
open database connections themselves, so tests can hand them a double.
"""

from .user_store import DuplicateUserError, SQLiteUserStore, UserStore  # noqa: F401
