"""Transaction Status Enumeration

Settlement outcome of a ledger record. Anything other than SUCCESS
is reported as an issue.
"""

from enum import Enum


class TransactionStatus(str, Enum):
    """Transaction status classification"""
    
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    PENDING = "PENDING"
    
    @classmethod
    def issues(cls) -> tuple["TransactionStatus", ...]:
        """Statuses that count as issues (not settled successfully)"""
        return (cls.FAILED, cls.PENDING)
    
    def __str__(self) -> str:
        return self.value
