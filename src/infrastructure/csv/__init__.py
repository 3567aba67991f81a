"""CSV adapters"""

from .csv_transaction_parser import CSVTransactionParser

__all__ = ["CSVTransactionParser"]
