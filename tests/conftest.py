"""
Pytest configuration and shared fixtures.
"""
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from domain.entities import Transaction  # noqa: E402
from domain.enums import TransactionStatus, TransactionType  # noqa: E402
from infrastructure.database import InMemoryTransactionRepository  # noqa: E402


FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_csv() -> bytes:
    """Sample upload with one row per status and both types."""
    return (
        b"timestamp,name,type,amount,status,description\n"
        b"1624507883,JOHN DOE,DEBIT,2500,SUCCESS,restaurant\n"
        b"1624608050,E-COMMERCE A,DEBIT,1500,FAILED,clothes\n"
        b"1624512883,COMPANY A,CREDIT,120000,SUCCESS,salary\n"
        b"1624615065,E-COMMERCE B,DEBIT,1500,PENDING,office supplies\n"
    )


@pytest.fixture
def make_transaction():
    """Factory for Transaction entities with sensible defaults."""
    counter = {"n": 0}

    def _make(
        name: str = "JOHN DOE",
        type: TransactionType = TransactionType.DEBIT,
        amount: int = 1000,
        status: TransactionStatus = TransactionStatus.SUCCESS,
        timestamp: int = 1624507883,
        description: str = "",
    ) -> Transaction:
        counter["n"] += 1
        return Transaction(
            id=f"txn-{counter['n']}",
            timestamp=timestamp,
            name=name,
            type=type,
            amount=amount,
            status=status,
            description=description,
        )

    return _make


@pytest.fixture
def memory_repository() -> InMemoryTransactionRepository:
    """In-memory repository with a fixed clock."""
    return InMemoryTransactionRepository(batch_size=2, clock=lambda: FIXED_NOW)
