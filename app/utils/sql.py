"""SQL construction helpers.

Both helpers only ever write developer-authored column names and operators
into statement text; every value is bound through a ``$n`` placeholder.
"""

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from app.core.exceptions import InvalidInputError

# Keys starting with this marker carry control data (e.g. ``_token``) and are
# never persisted.
RESERVED_PREFIX = "_"

PATTERN_OPERATORS = {"like", "ilike"}


def build_where_clause(
    params: Mapping[str, Any],
    condition_map: Mapping[str, Sequence[str]],
) -> Tuple[str, List[Any]]:
    """
    Generate the WHERE clause of a SELECT statement from optional filters.

    Args:
        params: filter values keyed by parameter name, e.g. query arguments.
        condition_map: mapping from an accepted parameter to the column and
            operator it controls. ``{"min_employees": ("num_employees", ">=")}``
            adds ``num_employees >= $n`` when ``min_employees`` is present.

    Returns:
        ``(clause, values)``. ``clause`` is ``""`` when no parameter matched,
        otherwise ``"WHERE ..."`` with conditions joined by ``AND``.
    """
    conditions = []
    values = []

    for key, value in params.items():
        if key not in condition_map:
            continue

        column, operator = condition_map[key]
        conditions.append(f"{column} {operator} ${len(values) + 1}")

        if operator.lower() in PATTERN_OPERATORS:
            values.append(f"%{value}%")
        else:
            values.append(value)

    if not conditions:
        return "", values

    return f"WHERE {' AND '.join(conditions)}", values


def sql_for_partial_update(
    table: str,
    items: Mapping[str, Any],
    key: str,
    key_value: Any,
) -> Tuple[str, List[Any]]:
    """
    Generate an UPDATE statement touching only the columns present in ``items``.

    ``sql_for_partial_update("users", {"first_name": "Ann"}, "username", "ann")``
    returns ``("UPDATE users SET first_name=$1 WHERE username=$2 RETURNING *",
    ["Ann", "ann"])``.

    Raises:
        InvalidInputError: when ``items`` holds no persistable field.
    """
    columns = []
    values = []

    for column, value in items.items():
        if column.startswith(RESERVED_PREFIX):
            continue
        values.append(value)
        columns.append(f"{column}=${len(values)}")

    if not columns:
        raise InvalidInputError("No fields to update")

    values.append(key_value)
    query = (
        f"UPDATE {table} SET {', '.join(columns)} "
        f"WHERE {key}=${len(values)} RETURNING *"
    )
    return query, values


def select_fields(data: Mapping[str, Any], allowed: Sequence[str]) -> Dict[str, Any]:
    """Keep only the allowed keys of ``data``, preserving its order."""
    return {k: v for k, v in data.items() if k in allowed}
