"""
Domain Exceptions
Error taxonomy shared by validators, parsers, use cases and routes
"""

from typing import Optional


class TransactionServiceError(Exception):
    """Base class for all service errors"""


class FieldValidationError(TransactionServiceError, ValueError):
    """A single raw value failed a field rule"""


class FileValidationError(TransactionServiceError):
    """Uploaded file rejected before parsing (name, extension, size)"""

    def __init__(self, message: str, reason: str):
        super().__init__(reason)
        self.message = message
        self.reason = reason


class CSVParseError(TransactionServiceError):
    """CSV payload rejected; the whole upload is aborted"""

    def __init__(self, line: int, reason: str, field: Optional[str] = None):
        self.line = line
        self.field = field
        self.reason = reason

        if field:
            text = f"Validation error at line {line} ({field}): {reason}"
        else:
            text = f"Validation error at line {line}: {reason}"
        super().__init__(text)


class NoValidTransactionsError(TransactionServiceError):
    """CSV payload contained no importable rows"""

    def __init__(self):
        super().__init__("No valid transactions found in CSV")


class QueryParameterError(TransactionServiceError):
    """A listing query parameter failed validation"""

    def __init__(self, message: str, cause: str):
        super().__init__(cause)
        self.message = message
        self.cause = cause


class RepositoryError(TransactionServiceError):
    """Storage backend failure"""
