"""
SQL construction for filtered, sorted, paginated transaction listings

Produces asyncpg-style ($n) parameterised statements. Column names in
ORDER BY come only from SORT_COLUMNS, never from caller input.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from domain.entities import PageRequest, TransactionFilters, TransactionSort
from domain.enums import TransactionStatus


TRANSACTION_COLUMNS = (
    "id, timestamp, name, type, amount, status, description, created_at, updated_at"
)

# Date filters use the UTC calendar day regardless of session time zone
CREATED_DATE = "(created_at AT TIME ZONE 'UTC')::date"

SORT_COLUMNS = {
    "timestamp": "timestamp",
    "amount": "amount",
    "name": "name",
    "status": "status",
    "type": "type",
    "description": "description",
    "created_at": "created_at",
}


@dataclass
class ListingQuery:
    """Count and page statements sharing one WHERE clause"""

    count_sql: str
    select_sql: str
    params: list[Any] = field(default_factory=list)
    page_params: list[Any] = field(default_factory=list)


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the search term matches literally"""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_where_clause(
    filters: TransactionFilters,
    issues_only: bool = False
) -> tuple[str, list[Any]]:
    """
    Build WHERE clause for the listing filters

    Args:
        filters: Optional predicates
        issues_only: Restrict to non-SUCCESS statuses

    Returns:
        (where_clause, params) - clause is empty when nothing applies
    """
    conditions = []
    params: list[Any] = []

    def placeholder(value: Any) -> str:
        params.append(value)
        return f"${len(params)}"

    if issues_only:
        failed, pending = TransactionStatus.issues()
        conditions.append(
            f"status IN ({placeholder(failed.value)}, {placeholder(pending.value)})"
        )

    if filters.status:
        conditions.append(f"status = {placeholder(filters.status.value)}")

    if filters.type:
        conditions.append(f"type = {placeholder(filters.type.value)}")

    if filters.amount > 0:
        conditions.append(f"amount = {placeholder(filters.amount)}")

    if filters.search:
        pattern = placeholder(f"%{escape_like(filters.search)}%")
        conditions.append(f"(name ILIKE {pattern} OR description ILIKE {pattern})")

    start = date.fromisoformat(filters.start_date) if filters.start_date else None
    end = date.fromisoformat(filters.end_date) if filters.end_date else None

    if start and end:
        conditions.append(
            f"{CREATED_DATE} BETWEEN {placeholder(start)} AND {placeholder(end)}"
        )
    elif start:
        conditions.append(f"{CREATED_DATE} >= {placeholder(start)}")
    elif end:
        conditions.append(f"{CREATED_DATE} <= {placeholder(end)}")

    where_clause = "WHERE " + " AND ".join(conditions) if conditions else ""
    return where_clause, params


def build_order_clause(sort: TransactionSort) -> str:
    """Explicit sort when both parts are given, insertion order otherwise"""
    if sort.is_active and sort.by in SORT_COLUMNS:
        direction = "DESC" if sort.descending else "ASC"
        return f"ORDER BY {SORT_COLUMNS[sort.by]} {direction}, seq ASC"
    return "ORDER BY seq ASC"


def build_listing_query(
    page_request: PageRequest,
    filters: TransactionFilters,
    sort: TransactionSort,
    issues_only: bool = False
) -> ListingQuery:
    """Build count + page statements for one listing request"""
    where_clause, params = build_where_clause(filters, issues_only)
    order_clause = build_order_clause(sort)

    count_sql = f"SELECT COUNT(*) FROM transactions {where_clause}".strip()

    limit_index = len(params) + 1
    select_sql = f"""
        SELECT {TRANSACTION_COLUMNS}
        FROM transactions
        {where_clause}
        {order_clause}
        LIMIT ${limit_index} OFFSET ${limit_index + 1}
    """

    return ListingQuery(
        count_sql=count_sql,
        select_sql=select_sql,
        params=params,
        page_params=params + [page_request.page_size, page_request.offset]
    )
