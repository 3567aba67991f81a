"""Transaction repository adapters"""

from .memory_adapter import InMemoryTransactionRepository
from .postgres_adapter import PostgresTransactionRepository

__all__ = ["InMemoryTransactionRepository", "PostgresTransactionRepository"]
