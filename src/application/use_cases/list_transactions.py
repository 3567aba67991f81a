"""
Application Use Cases: Transaction Listings and Balance
Parses listing parameters and delegates to the repository
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from application.ports.transaction_repository import ITransactionRepository
from domain.entities import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    BalanceSummary,
    PageRequest,
    TransactionFilters,
    TransactionPage,
    TransactionSort,
)
from domain.exceptions import FieldValidationError, QueryParameterError
from domain.validation import field_validator


TRANSACTIONS_MESSAGE = "Transactions retrieved successfully"
ISSUES_MESSAGE = "Issues retrieved successfully"


@dataclass
class ListingRequest:
    """Validated listing parameters"""

    page_request: PageRequest = field(default_factory=PageRequest)
    filters: TransactionFilters = field(default_factory=TransactionFilters)
    sort: TransactionSort = field(default_factory=TransactionSort)


def _parse_int(raw: Optional[str], default: int) -> int:
    value = (raw or "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise FieldValidationError(f"must be an integer, got {value!r}") from None


def parse_listing_request(params: Mapping[str, Optional[str]]) -> ListingRequest:
    """
    Parse and validate raw query parameters

    Recognised keys: page, page_size, status, type, search, amount,
    start_date, end_date, sort_by, sort_order. Validation stops at the
    first failure.

    Raises:
        QueryParameterError: With a message naming the failing parameter
    """

    def check(message: str, rule, *args):
        try:
            return rule(*args)
        except FieldValidationError as e:
            raise QueryParameterError(message, str(e)) from e

    def get(key: str) -> str:
        return params.get(key) or ""

    page = check("Invalid pagination parameters", _parse_int, get("page"), 1)
    page_size = check(
        "Invalid pagination parameters", _parse_int, get("page_size"), DEFAULT_PAGE_SIZE
    )
    page_size = min(page_size, MAX_PAGE_SIZE)
    check("Invalid pagination parameters", field_validator.validate_pagination, page, page_size)

    filters = TransactionFilters()

    if get("status").strip():
        filters.status = check(
            "Invalid status filter", field_validator.validate_status, get("status")
        )

    if get("type").strip():
        filters.type = check(
            "Invalid type filter", field_validator.validate_transaction_type, get("type")
        )

    if get("search"):
        filters.search = check(
            "Invalid search query", field_validator.validate_search_query, get("search")
        )

    filters.amount = check(
        "Invalid amount filter", field_validator.validate_amount_filter, get("amount")
    )

    filters.start_date = get("start_date").strip()
    filters.end_date = get("end_date").strip()
    check(
        "Invalid date range",
        field_validator.validate_date_range,
        filters.start_date,
        filters.end_date
    )

    sort = TransactionSort()
    if get("sort_by").strip():
        sort.by = check("Invalid sort field", field_validator.validate_sort_field, get("sort_by"))
    sort.order = check(
        "Invalid sort order", field_validator.validate_sort_order, get("sort_order")
    )

    return ListingRequest(
        page_request=PageRequest(page=page, page_size=page_size),
        filters=filters,
        sort=sort
    )


class ListTransactionsUseCase:
    """Use case for paginated transaction and issue listings"""

    def __init__(self, repository: ITransactionRepository):
        self.repository = repository

    async def get_all(self, request: ListingRequest) -> TransactionPage:
        return await self.repository.get_all(
            request.page_request, request.filters, request.sort
        )

    async def get_issues(self, request: ListingRequest) -> TransactionPage:
        """FAILED and PENDING transactions only"""
        return await self.repository.get_issues(
            request.page_request, request.filters, request.sort
        )


class GetBalanceUseCase:
    """Use case for the balance over successful transactions"""

    def __init__(self, repository: ITransactionRepository):
        self.repository = repository

    async def execute(self) -> BalanceSummary:
        balance, credits = await self.repository.get_balance()
        return BalanceSummary.from_totals(balance=balance, credits=credits)
