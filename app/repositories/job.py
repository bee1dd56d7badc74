"""Database operations related to jobs."""

from typing import Any, Dict, List, Mapping, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncConnection

from app.core.exceptions import InvalidInputError, NotFoundError
from app.db.base import INT4_MAX, INT4_MIN
from app.db.errors import FOREIGN_KEY_VIOLATION, translate_db_errors
from app.repositories.base import fetch_all, fetch_one
from app.utils.sql import build_where_clause, select_fields, sql_for_partial_update

logger = structlog.get_logger(__name__)

TABLE = "jobs"

JOB_COLUMNS = ("id", "title", "salary", "equity", "date_posted", "company_handle")
UPDATABLE_FIELDS = ("title", "salary", "equity")

CONDITION_MAP = {
    "search": ("title", "ILIKE"),
    "min_salary": ("salary", ">="),
    "min_equity": ("equity", ">="),
}


def _not_found(id: int) -> NotFoundError:
    return NotFoundError(f"No job with id {id}")


def _project(row: Mapping[str, Any]) -> Dict[str, Any]:
    return {column: row[column] for column in JOB_COLUMNS}


def _check_id(id: int) -> None:
    # ids outside the INTEGER range cannot exist and cannot be bound
    if not INT4_MIN <= id <= INT4_MAX:
        raise _not_found(id)


def _translate_errors(data: Mapping[str, Any]):
    handle = data.get("company_handle")
    return translate_db_errors(
        "job",
        {FOREIGN_KEY_VIOLATION: lambda column: f"No company with handle '{handle}'"},
    )


async def get(conn: AsyncConnection, id: int) -> Dict[str, Any]:
    """
    Get a job by id, with its company nested under ``company``.

    Raises:
        NotFoundError: no job has this id.
    """
    _check_id(id)
    row = await fetch_one(
        conn,
        """
        SELECT j.id, j.title, j.salary, j.equity, j.date_posted, j.company_handle,
               c.name AS company_name, c.num_employees AS company_num_employees,
               c.description AS company_description, c.logo_url AS company_logo_url
        FROM jobs AS j
        JOIN companies AS c ON c.handle = j.company_handle
        WHERE j.id = $1
        """,
        [id],
    )
    if row is None:
        raise _not_found(id)

    job = {column: row[column] for column in JOB_COLUMNS if column != "company_handle"}
    job["company"] = {
        "handle": row["company_handle"],
        "name": row["company_name"],
        "num_employees": row["company_num_employees"],
        "description": row["company_description"],
        "logo_url": row["company_logo_url"],
    }
    return job


async def get_all(
    conn: AsyncConnection, params: Optional[Mapping[str, Any]] = None
) -> List[Dict[str, Any]]:
    """
    List jobs as ``[{id, title, company_handle}]``, optionally filtered.

    Supported filters: ``search`` (substring of title), ``min_salary``,
    ``min_equity``.
    """
    where, values = build_where_clause(params or {}, CONDITION_MAP)
    return await fetch_all(
        conn,
        f"SELECT id, title, company_handle FROM jobs {where} ORDER BY id",
        values,
    )


async def create(conn: AsyncConnection, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Create a job. ``title`` and ``company_handle`` are required.

    Raises:
        InvalidInputError: a required field is missing, salary or equity is
            out of range, or the company does not exist.
    """
    for field in ("title", "company_handle"):
        if data.get(field) is None:
            raise InvalidInputError(f"{field} is required")

    with _translate_errors(data):
        row = await fetch_one(
            conn,
            """
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING id, title, salary, equity, date_posted, company_handle
            """,
            [data["title"], data.get("salary"), data.get("equity"), data["company_handle"]],
        )

    logger.info("job_created", id=row["id"], company_handle=row["company_handle"])
    return row


async def update(
    conn: AsyncConnection, id: int, data: Mapping[str, Any]
) -> Dict[str, Any]:
    """
    Update the title, salary and/or equity of a job.

    Raises:
        NotFoundError: no job has this id.
        InvalidInputError: no updatable field was supplied or a value is out
            of range.
    """
    _check_id(id)
    query, values = sql_for_partial_update(
        TABLE, select_fields(data, UPDATABLE_FIELDS), "id", id
    )
    with _translate_errors(data):
        row = await fetch_one(conn, query, values)

    if row is None:
        raise _not_found(id)

    logger.info("job_updated", id=id, fields=list(data))
    return _project(row)


async def delete(conn: AsyncConnection, id: int) -> int:
    """
    Delete a job and return its id.

    Raises:
        NotFoundError: no job has this id.
    """
    _check_id(id)
    row = await fetch_one(conn, "DELETE FROM jobs WHERE id = $1 RETURNING id", [id])
    if row is None:
        raise _not_found(id)

    logger.info("job_deleted", id=id)
    return row["id"]
