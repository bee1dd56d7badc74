"""Database operations related to companies."""

from typing import Any, Dict, List, Mapping, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncConnection

from app.core.exceptions import InvalidInputError, NotFoundError
from app.db.errors import translate_db_errors
from app.repositories.base import fetch_all, fetch_one
from app.utils.sql import build_where_clause, select_fields, sql_for_partial_update

logger = structlog.get_logger(__name__)

TABLE = "companies"

COMPANY_COLUMNS = ("handle", "name", "num_employees", "description", "logo_url")
UPDATABLE_FIELDS = COMPANY_COLUMNS

CONDITION_MAP = {
    "search": ("name", "ILIKE"),
    "min_employees": ("num_employees", ">="),
    "max_employees": ("num_employees", "<="),
}


def _not_found(handle: str) -> NotFoundError:
    return NotFoundError(f"No company with handle '{handle}'")


def _project(row: Mapping[str, Any]) -> Dict[str, Any]:
    return {column: row[column] for column in COMPANY_COLUMNS}


async def get(conn: AsyncConnection, handle: str) -> Dict[str, Any]:
    """
    Get a company by handle, with its jobs nested under ``jobs``.

    Company and jobs are fetched in a single LEFT JOIN; a company without
    jobs yields one row whose job columns are NULL.

    Raises:
        NotFoundError: no company has this handle.
    """
    rows = await fetch_all(
        conn,
        """
        SELECT c.handle, c.name, c.num_employees, c.description, c.logo_url,
               j.id AS job_id, j.title AS job_title, j.salary AS job_salary,
               j.equity AS job_equity, j.date_posted AS job_date_posted
        FROM companies AS c
        LEFT JOIN jobs AS j ON j.company_handle = c.handle
        WHERE c.handle = $1
        ORDER BY j.date_posted DESC, j.id
        """,
        [handle],
    )
    if not rows:
        raise _not_found(handle)

    company = _project(rows[0])
    company["jobs"] = [
        {
            "id": row["job_id"],
            "title": row["job_title"],
            "salary": row["job_salary"],
            "equity": row["job_equity"],
            "date_posted": row["job_date_posted"],
        }
        for row in rows
        if row["job_id"] is not None
    ]
    return company


async def get_all(
    conn: AsyncConnection, params: Optional[Mapping[str, Any]] = None
) -> List[Dict[str, Any]]:
    """
    List companies as ``[{handle, name}]``, optionally filtered.

    Supported filters: ``search`` (substring of name), ``min_employees``,
    ``max_employees``.

    Raises:
        InvalidInputError: ``min_employees`` is greater than ``max_employees``.
    """
    params = params or {}
    min_employees = params.get("min_employees")
    max_employees = params.get("max_employees")
    if (
        min_employees is not None
        and max_employees is not None
        and min_employees > max_employees
    ):
        raise InvalidInputError("min_employees cannot be greater than max_employees")

    where, values = build_where_clause(params, CONDITION_MAP)
    return await fetch_all(
        conn,
        f"SELECT handle, name FROM companies {where} ORDER BY name",
        values,
    )


async def create(conn: AsyncConnection, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Create a company. ``handle`` and ``name`` are required.

    Raises:
        ConflictError: handle or name already in use.
        InvalidInputError: a required field is missing or out of range.
    """
    for field in ("handle", "name"):
        if data.get(field) is None:
            raise InvalidInputError(f"{field} is required")

    values = [data.get(column) for column in COMPANY_COLUMNS]
    with translate_db_errors("company"):
        row = await fetch_one(
            conn,
            """
            INSERT INTO companies (handle, name, num_employees, description, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING handle, name, num_employees, description, logo_url
            """,
            values,
        )

    logger.info("company_created", handle=row["handle"])
    return row


async def update(
    conn: AsyncConnection, handle: str, data: Mapping[str, Any]
) -> Dict[str, Any]:
    """
    Update the supplied fields of a company; other fields are untouched.

    Raises:
        NotFoundError: no company has this handle.
        ConflictError: the new handle or name is already in use.
        InvalidInputError: no updatable field was supplied.
    """
    query, values = sql_for_partial_update(
        TABLE, select_fields(data, UPDATABLE_FIELDS), "handle", handle
    )
    with translate_db_errors("company"):
        row = await fetch_one(conn, query, values)

    if row is None:
        raise _not_found(handle)

    logger.info("company_updated", handle=handle, fields=list(data))
    return _project(row)


async def delete(conn: AsyncConnection, handle: str) -> str:
    """
    Delete a company (its jobs go with it) and return its handle.

    Raises:
        NotFoundError: no company has this handle.
    """
    row = await fetch_one(
        conn, "DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle]
    )
    if row is None:
        raise _not_found(handle)

    logger.info("company_deleted", handle=handle)
    return row["handle"]
