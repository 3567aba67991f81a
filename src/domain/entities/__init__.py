"""Domain entities"""

from .transaction import Transaction
from .listing import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PageRequest,
    TransactionFilters,
    TransactionPage,
    TransactionSort,
)
from .summary import BalanceSummary, UploadSummary

__all__ = [
    "Transaction",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PageRequest",
    "TransactionFilters",
    "TransactionPage",
    "TransactionSort",
    "BalanceSummary",
    "UploadSummary",
]
