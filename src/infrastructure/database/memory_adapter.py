"""
In-Memory Transaction Repository Adapter
Implements ITransactionRepository port over a Python list

Used when no DATABASE_URL is configured (local development) and by the
test-suite. Mirrors the PostgreSQL adapter's filter, sort and pagination
semantics, with list position standing in for the insertion sequence.
"""

import logging
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Callable, Optional

from application.ports.transaction_repository import ITransactionRepository
from domain.entities import (
    PageRequest,
    Transaction,
    TransactionFilters,
    TransactionPage,
    TransactionSort,
)
from domain.enums import TransactionStatus, TransactionType


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _sort_value(transaction: Transaction, column: str):
    value = getattr(transaction, column)
    if isinstance(value, (TransactionStatus, TransactionType)):
        return value.value
    return value


class InMemoryTransactionRepository(ITransactionRepository):
    """Process-local transaction store"""

    def __init__(self, batch_size: int = 100, clock: Callable[[], datetime] = _utcnow):
        """
        Args:
            batch_size: Chunk size used by create_batch
            clock: Source of created_at/updated_at timestamps
        """
        self.batch_size = batch_size
        self.clock = clock
        self._rows: list[Transaction] = []

    def _stamp(self, transaction: Transaction) -> Transaction:
        now = self.clock()
        return replace(transaction, created_at=now, updated_at=now)

    async def create(self, transaction: Transaction) -> None:
        self._rows.append(self._stamp(transaction))

    async def create_batch(self, transactions: list[Transaction]) -> None:
        if not transactions:
            return

        staged: list[Transaction] = []
        for start in range(0, len(transactions), self.batch_size):
            chunk = transactions[start:start + self.batch_size]
            staged.extend(self._stamp(t) for t in chunk)

        # Publish the whole batch at once
        self._rows.extend(staged)
        logger.info(f"[memory] inserted={len(staged)}")

    async def delete_all(self) -> None:
        self._rows.clear()

    async def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        for row in self._rows:
            if row.id == transaction_id:
                return row
        return None

    async def find_all(self) -> list[Transaction]:
        return list(self._rows)

    async def find_by_status(self, status: TransactionStatus) -> list[Transaction]:
        matches = [row for row in self._rows if row.status == status]
        return sorted(matches, key=lambda t: t.timestamp, reverse=True)

    async def count(self) -> int:
        return len(self._rows)

    async def count_by_status(self, status: TransactionStatus) -> int:
        return sum(1 for row in self._rows if row.status == status)

    async def get_balance(self) -> tuple[int, int]:
        credits = 0
        debits = 0
        for row in self._rows:
            if row.status != TransactionStatus.SUCCESS:
                continue
            if row.type == TransactionType.CREDIT:
                credits += row.amount
            else:
                debits += row.amount
        return credits - debits, credits

    async def get_issues(
        self,
        page_request: PageRequest,
        filters: TransactionFilters,
        sort: TransactionSort
    ) -> TransactionPage:
        return self._list(page_request, filters, sort, issues_only=True)

    async def get_all(
        self,
        page_request: PageRequest,
        filters: TransactionFilters,
        sort: TransactionSort
    ) -> TransactionPage:
        return self._list(page_request, filters, sort, issues_only=False)

    def _list(
        self,
        page_request: PageRequest,
        filters: TransactionFilters,
        sort: TransactionSort,
        issues_only: bool
    ) -> TransactionPage:
        matches = [
            row for row in self._rows
            if (not issues_only or row.is_issue) and self._matches(row, filters)
        ]
        total = len(matches)

        if sort.is_active:
            # sorted() is stable, so ties keep insertion order
            matches = sorted(
                matches,
                key=lambda t: _sort_value(t, sort.by),
                reverse=sort.descending
            )

        offset = page_request.offset
        items = matches[offset:offset + page_request.page_size]

        return TransactionPage(
            items=items,
            total=total,
            page_request=page_request,
            filters=filters,
            sort=sort
        )

    @staticmethod
    def _matches(row: Transaction, filters: TransactionFilters) -> bool:
        if filters.status and row.status != filters.status:
            return False

        if filters.type and row.type != filters.type:
            return False

        if filters.amount > 0 and row.amount != filters.amount:
            return False

        if filters.search:
            term = filters.search.lower()
            if term not in row.name.lower() and term not in row.description.lower():
                return False

        if filters.start_date or filters.end_date:
            # Dates compared in UTC, as the PostgreSQL adapter does
            created = row.created_at.astimezone(timezone.utc).date()
            if filters.start_date and created < date.fromisoformat(filters.start_date):
                return False
            if filters.end_date and created > date.fromisoformat(filters.end_date):
                return False

        return True

    async def health_check(self) -> bool:
        return True

    async def close(self):
        pass
