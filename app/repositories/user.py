"""Database operations related to users.

Password hashes never leave this module: every function returns the public
projection of a user.
"""

from typing import Any, Dict, List, Mapping, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncConnection

from app.core.exceptions import InvalidCredentialsError, InvalidInputError, NotFoundError
from app.core.security import get_password_hash, verify_password
from app.db.errors import translate_db_errors
from app.repositories.base import fetch_all, fetch_one
from app.utils.sql import build_where_clause, select_fields, sql_for_partial_update

logger = structlog.get_logger(__name__)

TABLE = "users"

PUBLIC_COLUMNS = ("username", "first_name", "last_name", "email", "photo_url", "is_admin")
LIST_COLUMNS = ("username", "first_name", "last_name", "email")
REQUIRED_FIELDS = ("username", "password", "first_name", "last_name", "email")

# is_admin is deliberately absent: it cannot be changed through this path
UPDATABLE_FIELDS = ("username", "password", "first_name", "last_name", "email", "photo_url")

CONDITION_MAP = {
    "search": ("username", "ILIKE"),
}

_SELECT_PUBLIC = f"SELECT {', '.join(PUBLIC_COLUMNS)} FROM users"


def _not_found(username: str) -> NotFoundError:
    return NotFoundError(f"No user with username '{username}'")


def _project(row: Mapping[str, Any]) -> Dict[str, Any]:
    return {column: row[column] for column in PUBLIC_COLUMNS}


async def register(conn: AsyncConnection, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Register a new user, storing a bcrypt hash of the password.

    Raises:
        ConflictError: username or email already in use.
        InvalidInputError: a required field is missing.
    """
    for field in REQUIRED_FIELDS:
        if data.get(field) is None:
            raise InvalidInputError(f"{field} is required")

    values = [
        data["username"],
        get_password_hash(data["password"]),
        data["first_name"],
        data["last_name"],
        data["email"],
        data.get("photo_url"),
    ]
    with translate_db_errors("user"):
        row = await fetch_one(
            conn,
            f"""
            INSERT INTO users (username, password, first_name, last_name, email, photo_url)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {', '.join(PUBLIC_COLUMNS)}
            """,
            values,
        )

    logger.info("user_registered", username=row["username"])
    return row


async def authenticate(conn: AsyncConnection, username: str, password: str) -> Dict[str, Any]:
    """
    Check a username/password pair and return the user.

    Raises:
        InvalidCredentialsError: unknown username or wrong password; both
            cases produce the same error.
    """
    row = await fetch_one(
        conn,
        f"SELECT password, {', '.join(PUBLIC_COLUMNS)} FROM users WHERE username = $1",
        [username],
    )
    if row is None or not verify_password(password, row["password"]):
        logger.info("login_failed", username=username)
        raise InvalidCredentialsError()

    return _project(row)


async def get(conn: AsyncConnection, username: str) -> Dict[str, Any]:
    """
    Get a user by username.

    Raises:
        NotFoundError: no user has this username.
    """
    row = await fetch_one(conn, f"{_SELECT_PUBLIC} WHERE username = $1", [username])
    if row is None:
        raise _not_found(username)
    return row


async def get_all(
    conn: AsyncConnection, params: Optional[Mapping[str, Any]] = None
) -> List[Dict[str, Any]]:
    """List users as ``[{username, first_name, last_name, email}]``."""
    where, values = build_where_clause(params or {}, CONDITION_MAP)
    return await fetch_all(
        conn,
        f"SELECT {', '.join(LIST_COLUMNS)} FROM users {where} ORDER BY username",
        values,
    )


async def update(
    conn: AsyncConnection, username: str, data: Mapping[str, Any]
) -> Dict[str, Any]:
    """
    Update the supplied fields of a user. A new password is hashed first.

    Raises:
        NotFoundError: no user has this username.
        ConflictError: the new username or email is already in use.
        InvalidInputError: no updatable field was supplied.
    """
    fields = select_fields(data, UPDATABLE_FIELDS)
    if fields.get("password") is not None:
        fields["password"] = get_password_hash(fields["password"])

    query, values = sql_for_partial_update(TABLE, fields, "username", username)
    with translate_db_errors("user"):
        row = await fetch_one(conn, query, values)

    if row is None:
        raise _not_found(username)

    logger.info("user_updated", username=username, fields=[f for f in fields if f != "password"])
    return _project(row)


async def delete(conn: AsyncConnection, username: str) -> str:
    """
    Delete a user and return the username.

    Raises:
        NotFoundError: no user has this username.
    """
    row = await fetch_one(
        conn, "DELETE FROM users WHERE username = $1 RETURNING username", [username]
    )
    if row is None:
        raise _not_found(username)

    logger.info("user_deleted", username=username)
    return row["username"]
