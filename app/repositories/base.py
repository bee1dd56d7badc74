"""Query execution helpers shared by the repositories."""

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncConnection


async def fetch_all(
    conn: AsyncConnection, query: str, values: Sequence[Any] = ()
) -> List[Dict[str, Any]]:
    """Run a ``$n``-parameterized statement and return every row as a dict."""
    result = await conn.exec_driver_sql(query, tuple(values))
    return [dict(row) for row in result.mappings().all()]


async def fetch_one(
    conn: AsyncConnection, query: str, values: Sequence[Any] = ()
) -> Optional[Dict[str, Any]]:
    """Run a ``$n``-parameterized statement and return the first row, if any."""
    result = await conn.exec_driver_sql(query, tuple(values))
    row = result.mappings().first()
    return dict(row) if row is not None else None
