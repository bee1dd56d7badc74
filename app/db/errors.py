"""Translate PostgreSQL constraint violations and data errors into domain errors."""

import re
from contextlib import contextmanager
from typing import Callable, Iterator, Mapping, Optional

import structlog
from sqlalchemy.exc import DBAPIError, IntegrityError

from app.core.exceptions import AppError, ConflictError, InvalidInputError

logger = structlog.get_logger(__name__)

# SQLSTATE codes (https://www.postgresql.org/docs/current/errcodes-appendix.html)
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
NOT_NULL_VIOLATION = "23502"
CHECK_VIOLATION = "23514"
DATA_EXCEPTION_CLASS = "22"

# "Key (handle)=(acme) already exists." -> "handle"
_KEY_PATTERN = re.compile(r"Key \(([^)]+)\)")


def _driver_error(exc: DBAPIError):
    """Return the underlying asyncpg exception when SQLAlchemy wrapped one."""
    orig = exc.orig
    return getattr(orig, "__cause__", None) or orig


def _sqlstate(exc: DBAPIError) -> Optional[str]:
    for err in (exc.orig, _driver_error(exc)):
        code = getattr(err, "sqlstate", None) or getattr(err, "pgcode", None)
        if code:
            return code
    return None


def parse_pg_error(exc: IntegrityError) -> Optional[str]:
    """
    Name the column a constraint violation occurred on.

    Reads the ``Key (column)=(value)`` detail of unique and foreign key
    violations, the column of not-null violations, and falls back to the
    constraint name (``<table>_<column>_key``) when no detail is available.
    """
    err = _driver_error(exc)

    column = getattr(err, "column_name", None)
    if column:
        return column

    detail = getattr(err, "detail", None) or ""
    match = _KEY_PATTERN.search(detail)
    if match:
        return match.group(1)

    constraint = getattr(err, "constraint_name", None)
    table = getattr(err, "table_name", None)
    if constraint:
        name = constraint
        if table and name.startswith(f"{table}_"):
            name = name[len(table) + 1:]
        return re.sub(r"_(key|fkey|check)$", "", name)

    return None


def translate_integrity_error(
    exc: IntegrityError,
    entity: str,
    messages: Mapping[str, Callable[[str], str]] = None,
) -> AppError:
    """
    Map an ``IntegrityError`` to the domain error the route layer reports.

    Args:
        exc: error raised by the storage engine.
        entity: human name of the entity, used in messages ("company").
        messages: optional per-SQLSTATE message factories receiving the
            offending column name.
    """
    code = _sqlstate(exc)
    column = parse_pg_error(exc) or "value"
    custom = (messages or {}).get(code)

    logger.info("constraint_violation", entity=entity, sqlstate=code, column=column)

    if custom is not None:
        message = custom(column)
        if code == UNIQUE_VIOLATION:
            return ConflictError(message)
        return InvalidInputError(message)

    if code == UNIQUE_VIOLATION:
        return ConflictError(f"A {entity} with that {column} already exists")
    if code == FOREIGN_KEY_VIOLATION:
        return InvalidInputError(f"Invalid reference in {column}")
    if code == NOT_NULL_VIOLATION:
        return InvalidInputError(f"{column} is required")
    if code == CHECK_VIOLATION:
        return InvalidInputError(f"{column} is out of range")

    return InvalidInputError(f"Invalid {entity} data")


def is_data_error(exc: DBAPIError) -> bool:
    """
    True for values the database cannot store: SQLSTATE class 22 errors
    (numeric out of range, value too long) and parameters the driver
    refused to encode, such as an integer beyond int32.
    """
    code = _sqlstate(exc)
    if code:
        return code.startswith(DATA_EXCEPTION_CLASS)
    return isinstance(_driver_error(exc), ValueError)


@contextmanager
def translate_db_errors(
    entity: str,
    messages: Mapping[str, Callable[[str], str]] = None,
) -> Iterator[None]:
    """
    Re-raise constraint violations and data errors from the enclosed
    statement as domain errors; anything else propagates unchanged.
    """
    try:
        yield
    except IntegrityError as e:
        raise translate_integrity_error(e, entity, messages) from e
    except DBAPIError as e:
        if not is_data_error(e):
            raise
        logger.info("data_error", entity=entity, sqlstate=_sqlstate(e))
        raise InvalidInputError(f"Invalid {entity} data") from e
