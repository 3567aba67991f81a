"""
Domain Entity: Transaction
Represents a single ingested bank transaction
"""

from dataclasses import dataclass
from typing import Optional
from datetime import datetime

from domain.enums import TransactionStatus, TransactionType


@dataclass
class Transaction:
    """Bank transaction entity

    Amount is stored in minor units (input decimal x 100).
    """

    id: str
    timestamp: int
    name: str
    type: TransactionType
    amount: int
    status: TransactionStatus
    description: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_credit(self) -> bool:
        return self.type == TransactionType.CREDIT

    @property
    def is_issue(self) -> bool:
        """Check if transaction did not settle successfully"""
        return self.status != TransactionStatus.SUCCESS

    def duplicate_key(self) -> tuple:
        """Identity used to suppress repeated rows within one upload"""
        return (self.timestamp, self.name, self.type.value, self.amount, self.status.value)

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "name": self.name,
            "type": self.type.value,
            "amount": self.amount,
            "status": self.status.value,
            "description": self.description,
            "created_at": self.created_at.isoformat() if self.created_at else None
        }
