"""
Transaction Repository Port Interface
Defines the contract for transaction storage operations
"""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import (
    PageRequest,
    Transaction,
    TransactionFilters,
    TransactionPage,
    TransactionSort,
)
from domain.enums import TransactionStatus


class ITransactionRepository(ABC):
    """
    Port interface for transaction storage
    Following Hexagonal Architecture - this is the application layer port
    """

    async def connect(self) -> None:
        """Open backend resources; called once at startup"""
        pass

    @abstractmethod
    async def create(self, transaction: Transaction) -> None:
        """Persist a single transaction"""
        pass

    @abstractmethod
    async def create_batch(self, transactions: list[Transaction]) -> None:
        """
        Persist transactions in chunks

        Args:
            transactions: Records to insert; an empty list is a no-op
        """
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Purge every stored transaction"""
        pass

    @abstractmethod
    async def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """
        Retrieve transaction by ID

        Returns:
            Transaction or None if not found
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Transaction]:
        """All transactions in insertion order"""
        pass

    @abstractmethod
    async def find_by_status(self, status: TransactionStatus) -> list[Transaction]:
        """Transactions with the given status, newest timestamp first"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def count_by_status(self, status: TransactionStatus) -> int:
        pass

    @abstractmethod
    async def get_balance(self) -> tuple[int, int]:
        """
        Balance over SUCCESS transactions

        Returns:
            (balance, credits) where balance = credits - debits
        """
        pass

    @abstractmethod
    async def get_issues(
        self,
        page_request: PageRequest,
        filters: TransactionFilters,
        sort: TransactionSort
    ) -> TransactionPage:
        """
        Filtered, sorted, paginated FAILED/PENDING transactions

        Args:
            page_request: Page number and size
            filters: Optional predicates (ANDed)
            sort: Applied only when both field and order are set

        Returns:
            TransactionPage with the total count before pagination
        """
        pass

    @abstractmethod
    async def get_all(
        self,
        page_request: PageRequest,
        filters: TransactionFilters,
        sort: TransactionSort
    ) -> TransactionPage:
        """Filtered, sorted, paginated transactions of any status"""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check storage health

        Returns:
            bool: True if storage is accessible
        """
        pass

    @abstractmethod
    async def close(self):
        """
        Close connections and cleanup resources
        """
        pass
