"""
Field validation rules for transaction attributes and listing query parameters.

Every rule is a plain function: it takes the raw string, raises
FieldValidationError with the failure reason, and otherwise returns the
normalised value so callers never re-parse.
"""

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence

from domain.enums import TransactionStatus, TransactionType
from domain.exceptions import FieldValidationError


REQUIRED_FIELD_COUNT = 6
MAX_NAME_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 500
MAX_SEARCH_LENGTH = 255
MAX_PAGE_SIZE = 100

# Storage columns are BIGINT
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Amounts at or above 10**17 overflow INT64_MAX once scaled by 100
_MAX_AMOUNT_EXPONENT = 16

SUSPICIOUS_SEARCH_PATTERNS = (
    "'; DROP",
    "'; DELETE",
    "'; UPDATE",
    "'; INSERT",
    "--",
    "/*",
    "*/",
)

# Accepted spellings -> storage column
SORT_FIELDS = {
    "timestamp": "timestamp",
    "amount": "amount",
    "name": "name",
    "status": "status",
    "type": "type",
    "description": "description",
    "created_at": "created_at",
    "createdat": "created_at",
}

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_int64(value: str) -> Optional[int]:
    """Parse a signed base-10 integer, None when it falls outside int64"""
    # Length check first so oversized inputs never reach int()
    if len(value.lstrip("+-").lstrip("0")) > 19:
        return None
    number = int(value)
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number


def validate_timestamp(raw: str) -> int:
    """Unix epoch seconds as a base-10 integer within the int64 range"""
    value = (raw or "").strip()
    if not value:
        raise FieldValidationError("timestamp is required")
    if not _INTEGER_RE.match(value):
        raise FieldValidationError("invalid timestamp format: must be a Unix epoch integer")
    timestamp = _parse_int64(value)
    if timestamp is None:
        raise FieldValidationError("invalid timestamp: out of range")
    return timestamp


def validate_name(raw: str) -> str:
    value = (raw or "").strip()
    if not value:
        raise FieldValidationError("name is required")
    if len(value) > MAX_NAME_LENGTH:
        raise FieldValidationError(f"name is too long (max {MAX_NAME_LENGTH} characters)")
    return value


def validate_transaction_type(raw: str) -> TransactionType:
    value = (raw or "").strip().upper()
    if not value:
        raise FieldValidationError("transaction type is required")
    try:
        return TransactionType(value)
    except ValueError:
        raise FieldValidationError(
            f"invalid transaction type: {value} (expected CREDIT or DEBIT)"
        ) from None


def validate_amount(raw: str) -> Decimal:
    """Non-negative decimal amount in major units whose minor-unit value fits int64"""
    value = (raw or "").strip()
    if not value:
        raise FieldValidationError("amount is required")
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise FieldValidationError("invalid amount format: must be a valid number") from None
    if not amount.is_finite():
        raise FieldValidationError("invalid amount format: must be a valid number")
    if amount < 0:
        raise FieldValidationError("amount cannot be negative")
    # Exponent check first so huge exponents are never multiplied out
    if amount and (amount.adjusted() > _MAX_AMOUNT_EXPONENT or amount * 100 > INT64_MAX):
        raise FieldValidationError("amount is too large")
    return amount


def validate_status(raw: str) -> TransactionStatus:
    value = (raw or "").strip().upper()
    if not value:
        raise FieldValidationError("status is required")
    try:
        return TransactionStatus(value)
    except ValueError:
        raise FieldValidationError(
            f"invalid status: {value} (expected SUCCESS, FAILED, or PENDING)"
        ) from None


def validate_description(raw: Optional[str]) -> str:
    value = (raw or "").strip()
    if len(value) > MAX_DESCRIPTION_LENGTH:
        raise FieldValidationError(
            f"description is too long (max {MAX_DESCRIPTION_LENGTH} characters)"
        )
    return value


def validate_field_count(fields: Sequence[str]) -> None:
    if len(fields) < REQUIRED_FIELD_COUNT:
        raise FieldValidationError(
            f"invalid CSV format: expected {REQUIRED_FIELD_COUNT} fields, got {len(fields)}"
        )


def validate_search_query(raw: str) -> str:
    """
    Reject over-long search terms and obvious SQL fragments.

    Not a sanitizer: queries are always parameterised downstream.
    """
    value = raw or ""
    if len(value) > MAX_SEARCH_LENGTH:
        raise FieldValidationError(
            f"search query is too long (max {MAX_SEARCH_LENGTH} characters)"
        )

    upper = value.upper()
    for pattern in SUSPICIOUS_SEARCH_PATTERNS:
        if pattern in upper:
            raise FieldValidationError("invalid search query: contains suspicious pattern")
    return value


def validate_sort_field(raw: str) -> str:
    """Returns the storage column name for an allowed sort field"""
    value = (raw or "").strip().lower()
    column = SORT_FIELDS.get(value)
    if column is None:
        raise FieldValidationError(f"invalid sort field: {value}")
    return column


def validate_sort_order(raw: Optional[str]) -> Optional[str]:
    """Empty means unspecified; otherwise ASC or DESC"""
    value = (raw or "").strip().upper()
    if not value:
        return None
    if value not in ("ASC", "DESC"):
        raise FieldValidationError(f"invalid sort order: {value} (expected ASC or DESC)")
    return value


def validate_pagination(page: int, page_size: int) -> None:
    if page < 1:
        raise FieldValidationError("page must be >= 1")
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise FieldValidationError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")


def validate_amount_filter(raw: Optional[str]) -> int:
    """Optional exact-amount filter in minor units; integers only"""
    value = (raw or "").strip()
    if not value:
        return 0
    if not _INTEGER_RE.match(value):
        raise FieldValidationError("invalid amount filter: must be an integer")
    amount = _parse_int64(value)
    if amount is None:
        raise FieldValidationError("invalid amount filter: out of range")
    return amount


def _is_calendar_date(value: str) -> bool:
    if not _DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def validate_date_range(start_date: Optional[str], end_date: Optional[str]) -> None:
    """Format check only; start after end is not rejected"""
    if start_date and not _is_calendar_date(start_date):
        raise FieldValidationError("invalid start_date format: expected YYYY-MM-DD")
    if end_date and not _is_calendar_date(end_date):
        raise FieldValidationError("invalid end_date format: expected YYYY-MM-DD")
