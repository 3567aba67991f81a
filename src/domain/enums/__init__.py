"""Domain enumerations"""

from .transaction_type import TransactionType
from .transaction_status import TransactionStatus

__all__ = ["TransactionType", "TransactionStatus"]
