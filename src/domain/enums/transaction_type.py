"""Transaction Type Enumeration

Direction of money movement for a ledger record.
"""

from enum import Enum


class TransactionType(str, Enum):
    """Transaction type classification
    
    CREDIT: Money coming into the account
    DEBIT: Money leaving the account
    """
    
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    
    def __str__(self) -> str:
        return self.value
