"""
PostgreSQL Transaction Repository Adapter
Implements ITransactionRepository port using asyncpg
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg
from asyncpg.pool import Pool

from application.ports.transaction_repository import ITransactionRepository
from domain.entities import (
    PageRequest,
    Transaction,
    TransactionFilters,
    TransactionPage,
    TransactionSort,
)
from domain.enums import TransactionStatus, TransactionType
from domain.exceptions import RepositoryError
from infrastructure.database.query_builder import TRANSACTION_COLUMNS, build_listing_query


logger = logging.getLogger(__name__)


INSERT_SQL = """
    INSERT INTO transactions (
        id, timestamp, name, type, amount, status, description,
        created_at, updated_at
    ) VALUES (
        $1, $2, $3, $4, $5, $6, $7, NOW(), NOW()
    )
"""

SUM_SUCCESSFUL_SQL = """
    SELECT COALESCE(SUM(amount), 0)
    FROM transactions
    WHERE type = $1 AND status = $2
"""


def _row_to_transaction(row) -> Transaction:
    return Transaction(
        id=row["id"],
        timestamp=row["timestamp"],
        name=row["name"],
        type=TransactionType(row["type"]),
        amount=row["amount"],
        status=TransactionStatus(row["status"]),
        description=row["description"] or "",
        created_at=row["created_at"],
        updated_at=row["updated_at"]
    )


def _insert_args(transaction: Transaction) -> tuple:
    return (
        transaction.id,
        transaction.timestamp,
        transaction.name,
        transaction.type.value,
        transaction.amount,
        transaction.status.value,
        transaction.description
    )


class PostgresTransactionRepository(ITransactionRepository):
    """
    PostgreSQL adapter implementing ITransactionRepository port
    Uses asyncpg for async database operations
    """

    def __init__(
        self,
        connection_string: str,
        min_pool_size: int = 1,
        max_pool_size: int = 10,
        batch_size: int = 100
    ):
        """
        Initialize PostgreSQL adapter

        Args:
            connection_string: PostgreSQL connection string
            min_pool_size: Minimum connection pool size
            max_pool_size: Maximum connection pool size
            batch_size: Rows per executemany chunk in create_batch
        """
        self.connection_string = connection_string
        self.min_pool_size = min_pool_size
        self.max_pool_size = max_pool_size
        self.batch_size = batch_size
        self.pool: Optional[Pool] = None

    async def connect(self):
        """
        Establish database connection pool
        Must be called before using the adapter
        """
        if self.pool is None:
            try:
                self.pool = await asyncpg.create_pool(
                    self.connection_string,
                    min_size=self.min_pool_size,
                    max_size=self.max_pool_size,
                    command_timeout=60
                )
            except (asyncpg.PostgresError, OSError) as e:
                logger.error(f"[postgres] connection failed: {e}")
                raise RepositoryError(f"Database connection failed: {e}") from e

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[asyncpg.Connection]:
        """Acquire a pooled connection, translating driver errors"""
        if self.pool is None:
            raise RepositoryError("Database not connected. Call connect() first.")

        try:
            async with self.pool.acquire() as conn:
                yield conn
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error(f"[postgres] query failed: {e}")
            raise RepositoryError(str(e)) from e

    async def create(self, transaction: Transaction) -> None:
        async with self._connection() as conn:
            await conn.execute(INSERT_SQL, *_insert_args(transaction))

    async def create_batch(self, transactions: list[Transaction]) -> None:
        """
        Insert in chunks of batch_size inside one database transaction,
        so a failure leaves none of the batch visible
        """
        if not transactions:
            return

        async with self._connection() as conn:
            async with conn.transaction():
                for start in range(0, len(transactions), self.batch_size):
                    chunk = transactions[start:start + self.batch_size]
                    await conn.executemany(INSERT_SQL, [_insert_args(t) for t in chunk])

        logger.info(f"[postgres] inserted={len(transactions)}")

    async def delete_all(self) -> None:
        async with self._connection() as conn:
            await conn.execute("DELETE FROM transactions")

    async def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        query = f"SELECT {TRANSACTION_COLUMNS} FROM transactions WHERE id = $1"

        async with self._connection() as conn:
            row = await conn.fetchrow(query, transaction_id)

        if row is None:
            return None

        return _row_to_transaction(row)

    async def find_all(self) -> list[Transaction]:
        query = f"SELECT {TRANSACTION_COLUMNS} FROM transactions ORDER BY seq ASC"

        async with self._connection() as conn:
            rows = await conn.fetch(query)

        return [_row_to_transaction(row) for row in rows]

    async def find_by_status(self, status: TransactionStatus) -> list[Transaction]:
        query = f"""
            SELECT {TRANSACTION_COLUMNS}
            FROM transactions
            WHERE status = $1
            ORDER BY timestamp DESC, seq ASC
        """

        async with self._connection() as conn:
            rows = await conn.fetch(query, status.value)

        return [_row_to_transaction(row) for row in rows]

    async def count(self) -> int:
        async with self._connection() as conn:
            return await conn.fetchval("SELECT COUNT(*) FROM transactions")

    async def count_by_status(self, status: TransactionStatus) -> int:
        async with self._connection() as conn:
            return await conn.fetchval(
                "SELECT COUNT(*) FROM transactions WHERE status = $1",
                status.value
            )

    async def get_balance(self) -> tuple[int, int]:
        async with self._connection() as conn:
            credits = await conn.fetchval(
                SUM_SUCCESSFUL_SQL,
                TransactionType.CREDIT.value,
                TransactionStatus.SUCCESS.value
            )
            debits = await conn.fetchval(
                SUM_SUCCESSFUL_SQL,
                TransactionType.DEBIT.value,
                TransactionStatus.SUCCESS.value
            )

        credits = int(credits or 0)
        debits = int(debits or 0)
        return credits - debits, credits

    async def get_issues(
        self,
        page_request: PageRequest,
        filters: TransactionFilters,
        sort: TransactionSort
    ) -> TransactionPage:
        return await self._list(page_request, filters, sort, issues_only=True)

    async def get_all(
        self,
        page_request: PageRequest,
        filters: TransactionFilters,
        sort: TransactionSort
    ) -> TransactionPage:
        return await self._list(page_request, filters, sort, issues_only=False)

    async def _list(
        self,
        page_request: PageRequest,
        filters: TransactionFilters,
        sort: TransactionSort,
        issues_only: bool
    ) -> TransactionPage:
        query = build_listing_query(page_request, filters, sort, issues_only=issues_only)

        async with self._connection() as conn:
            total = await conn.fetchval(query.count_sql, *query.params)
            rows = await conn.fetch(query.select_sql, *query.page_params)

        return TransactionPage(
            items=[_row_to_transaction(row) for row in rows],
            total=int(total or 0),
            page_request=page_request,
            filters=filters,
            sort=sort
        )

    async def health_check(self) -> bool:
        """
        Check database connection health
        """
        if self.pool is None:
            return False

        try:
            async with self.pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except (asyncpg.PostgresError, OSError) as e:
            logger.warning(f"[postgres] health check failed: {e}")
            return False

    async def close(self):
        """
        Close database connection pool
        """
        if self.pool is not None:
            await self.pool.close()
            self.pool = None
