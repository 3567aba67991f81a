"""
Port: CSV Parser Interface
Defines contract for turning an uploaded CSV payload into transactions
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from domain.entities.transaction import Transaction


class ICSVParser(ABC):
    """Interface for CSV transaction parsing"""

    @abstractmethod
    def parse(self, stream: BinaryIO) -> list[Transaction]:
        """
        Parse and validate a CSV payload

        Args:
            stream: Binary stream; first row is a header and is discarded

        Returns:
            Transactions in row order, duplicates within the payload removed

        Raises:
            CSVParseError: If any row fails validation (nothing is returned)
            NoValidTransactionsError: If no row survives
        """
        pass
