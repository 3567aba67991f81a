"""
API Schemas: Pydantic models for request/response validation
"""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field

from domain.entities import BalanceSummary, Transaction, TransactionPage, UploadSummary


class TransactionSchema(BaseModel):
    """Transaction schema"""

    id: str
    timestamp: int
    name: str
    type: str
    amount: int = Field(..., ge=0, description="Amount in minor units")
    status: str
    description: str
    created_at: Optional[str] = None

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionSchema":
        return cls(**transaction.to_dict())


class PaginationLinksSchema(BaseModel):
    """Pagination links (query strings)"""

    next: Optional[str] = None
    prev: Optional[str] = None


class PaginationSchema(BaseModel):
    """Pagination metadata"""

    total: int
    count: int
    per_page: int
    current_page: int
    total_pages: int
    links: PaginationLinksSchema


class SortSchema(BaseModel):
    """Sort echo"""

    by: str = ""
    order: str = ""


class ListingMetaSchema(BaseModel):
    """Listing metadata"""

    pagination: PaginationSchema
    filters: Dict[str, Any] = Field(default_factory=dict, description="Filters actually applied")
    sort: SortSchema


class ListingSchema(BaseModel):
    """Paginated transaction listing"""

    message: str
    data: List[TransactionSchema]
    meta: ListingMetaSchema

    @classmethod
    def from_page(cls, message: str, page: TransactionPage) -> "ListingSchema":
        return cls(
            message=message,
            data=[TransactionSchema.from_entity(t) for t in page.items],
            meta=ListingMetaSchema(
                pagination=PaginationSchema(**page.pagination()),
                filters=page.filters.applied(),
                sort=SortSchema(**page.sort.to_dict())
            )
        )


class ListingResponse(BaseModel):
    """Response schema for listing endpoints"""

    status: int = 200
    data: ListingSchema


class UploadSummarySchema(BaseModel):
    """Upload result"""

    message: str
    total_records: int
    success_records: int
    failed_records: int
    pending_records: int

    @classmethod
    def from_entity(cls, summary: UploadSummary) -> "UploadSummarySchema":
        return cls(**summary.to_dict())


class UploadResponse(BaseModel):
    """Response schema for upload endpoint"""

    status: int = 200
    data: UploadSummarySchema


class BalanceSchema(BaseModel):
    """Balance in minor units"""

    balance: int
    credits: int
    debits: int

    @classmethod
    def from_entity(cls, summary: BalanceSummary) -> "BalanceSchema":
        return cls(**summary.to_dict())


class BalanceResponse(BaseModel):
    """Response schema for balance endpoint"""

    status: int = 200
    data: BalanceSchema


class MessageSchema(BaseModel):
    message: str


class MessageResponse(BaseModel):
    """Response schema for clear endpoint"""

    status: int = 200
    data: MessageSchema


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    service: str
    version: str
    storage_type: str
    database_status: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response schema"""

    status: int
    message: str
    error: Optional[str] = None
