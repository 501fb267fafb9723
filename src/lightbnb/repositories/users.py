from logging import Logger, getLogger
from typing import Final, Optional

from duckdb import ConstraintException

from lightbnb.db import Database
from lightbnb.errors import DuplicateUserError, QueryExecutionError
from lightbnb.models.user import NewUser, User

_logger: Final[Logger] = getLogger(__name__)

_user_columns: Final[str] = "id, name, email"


def get_user_with_email(database: Database, email: str) -> Optional[User]:
    row = database.fetchone(
        f"SELECT {_user_columns} FROM users WHERE email = $1",
        [email.lower()],
    )
    return User(**row) if row is not None else None


def get_user_with_id(database: Database, user_id: int) -> Optional[User]:
    row = database.fetchone(
        f"SELECT {_user_columns} FROM users WHERE id = $1",
        [user_id],
    )
    return User(**row) if row is not None else None


def add_user(database: Database, new_user: NewUser) -> User:
    """Raises DuplicateUserError when the email is already registered."""
    try:
        row = database.fetchone(
            f"INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING {_user_columns}",
            [new_user.name, new_user.email.lower(), new_user.password],
            sensitive=True,
        )
    except QueryExecutionError as e:
        if isinstance(e.cause, ConstraintException):
            raise DuplicateUserError(new_user.email.lower()) from e
        raise
    user = User(**row)
    _logger.info(f"added user {user.id}")
    return user
