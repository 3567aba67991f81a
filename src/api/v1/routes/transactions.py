"""
API Routes: Balance, Transactions and Issues
"""

import logging

from fastapi import APIRouter, Depends, Request

from api.v1.errors import error_response
from api.v1.schemas import (
    BalanceResponse,
    BalanceSchema,
    ErrorResponse,
    ListingResponse,
    ListingSchema,
)
from api.v1.dependencies import get_balance_use_case, get_list_use_case
from application.use_cases.list_transactions import (
    ISSUES_MESSAGE,
    TRANSACTIONS_MESSAGE,
    GetBalanceUseCase,
    ListTransactionsUseCase,
    parse_listing_request,
)
from domain.exceptions import QueryParameterError, RepositoryError


logger = logging.getLogger(__name__)

router = APIRouter()

LISTING_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get(
    "/balance",
    response_model=BalanceResponse,
    responses={500: {"model": ErrorResponse}}
)
async def get_balance(
    use_case: GetBalanceUseCase = Depends(get_balance_use_case)
):
    """
    Balance over SUCCESS transactions

    balance = credits - debits, all amounts in minor units
    """

    try:
        summary = await use_case.execute()
    except RepositoryError as e:
        logger.error(f"[balance] failed to calculate balance: {e}")
        return error_response(500, "Failed to calculate balance", str(e))

    return BalanceResponse(data=BalanceSchema.from_entity(summary))


@router.get("/transactions", response_model=ListingResponse, responses=LISTING_RESPONSES)
async def list_transactions(
    request: Request,
    use_case: ListTransactionsUseCase = Depends(get_list_use_case)
):
    """
    Paginated transactions of any status

    Query parameters: page, page_size (max 100), status, type, search,
    amount (minor units), start_date, end_date (YYYY-MM-DD, on created_at),
    sort_by, sort_order (ASC/DESC; sorting needs both)
    """

    try:
        listing = parse_listing_request(request.query_params)
    except QueryParameterError as e:
        logger.warning(f"[transactions] {e.message}: {e.cause}")
        return error_response(400, e.message, e.cause)

    try:
        page = await use_case.get_all(listing)
    except RepositoryError as e:
        logger.error(f"[transactions] failed to retrieve transactions: {e}")
        return error_response(500, "Failed to retrieve transactions", str(e))

    return ListingResponse(data=ListingSchema.from_page(TRANSACTIONS_MESSAGE, page))


@router.get("/issues", response_model=ListingResponse, responses=LISTING_RESPONSES)
async def list_issues(
    request: Request,
    use_case: ListTransactionsUseCase = Depends(get_list_use_case)
):
    """Paginated FAILED and PENDING transactions (same parameters as /transactions)"""

    try:
        listing = parse_listing_request(request.query_params)
    except QueryParameterError as e:
        logger.warning(f"[issues] {e.message}: {e.cause}")
        return error_response(400, e.message, e.cause)

    try:
        page = await use_case.get_issues(listing)
    except RepositoryError as e:
        logger.error(f"[issues] failed to retrieve issues: {e}")
        return error_response(500, "Failed to retrieve issues", str(e))

    return ListingResponse(data=ListingSchema.from_page(ISSUES_MESSAGE, page))
