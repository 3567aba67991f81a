"""
Domain Entities: Listing
Filter, sort and page descriptions for transaction queries and the page they produce
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Any

from domain.enums import TransactionStatus, TransactionType
from .transaction import Transaction


DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass
class TransactionFilters:
    """Optional predicates, ANDed together when present"""

    status: Optional[TransactionStatus] = None
    type: Optional[TransactionType] = None
    search: str = ""
    amount: int = 0
    start_date: str = ""
    end_date: str = ""

    def applied(self) -> dict[str, Any]:
        """Filters actually in effect, for echoing back to the caller"""
        applied: dict[str, Any] = {}
        if self.status:
            applied["status"] = self.status.value
        if self.type:
            applied["type"] = self.type.value
        if self.search:
            applied["search"] = self.search
        if self.amount > 0:
            applied["amount"] = self.amount
        if self.start_date:
            applied["start_date"] = self.start_date
        if self.end_date:
            applied["end_date"] = self.end_date
        return applied


@dataclass
class TransactionSort:
    """Sort request; only honoured when both field and order are given"""

    by: Optional[str] = None
    order: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return bool(self.by) and bool(self.order)

    @property
    def descending(self) -> bool:
        return (self.order or "").upper() == "DESC"

    def to_dict(self) -> dict:
        return {"by": self.by or "", "order": self.order or ""}


@dataclass
class PageRequest:
    """1-based page request"""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass
class TransactionPage:
    """One page of a filtered listing plus the total matching count"""

    items: list[Transaction]
    total: int
    page_request: PageRequest
    filters: TransactionFilters = field(default_factory=TransactionFilters)
    sort: TransactionSort = field(default_factory=TransactionSort)

    @property
    def total_pages(self) -> int:
        if self.total <= 0:
            return 0
        return math.ceil(self.total / self.page_request.page_size)

    @property
    def next_link(self) -> Optional[str]:
        page = self.page_request.page
        if page < self.total_pages:
            return self._link(page + 1)
        return None

    @property
    def prev_link(self) -> Optional[str]:
        page = self.page_request.page
        if page > 1:
            return self._link(page - 1)
        return None

    def _link(self, page: int) -> str:
        return f"?page={page}&page_size={self.page_request.page_size}"

    def pagination(self) -> dict:
        """Pagination metadata block"""
        return {
            "total": self.total,
            "count": len(self.items),
            "per_page": self.page_request.page_size,
            "current_page": self.page_request.page,
            "total_pages": self.total_pages,
            "links": {
                "next": self.next_link,
                "prev": self.prev_link
            }
        }
