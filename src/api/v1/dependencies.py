"""
API Dependencies: Dependency Injection Container
"""

import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, Request

from application.ports.csv_parser import ICSVParser
from application.ports.transaction_repository import ITransactionRepository
from application.use_cases.list_transactions import GetBalanceUseCase, ListTransactionsUseCase
from application.use_cases.upload_transactions import UploadTransactionsUseCase
from config import Settings
from infrastructure.csv import CSVTransactionParser
from infrastructure.database import InMemoryTransactionRepository, PostgresTransactionRepository


logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> ITransactionRepository:
    """Get repository implementation (PostgreSQL or in-memory fallback)"""

    if settings.DATABASE_URL:
        return PostgresTransactionRepository(
            connection_string=settings.DATABASE_URL,
            min_pool_size=settings.DATABASE_MIN_SIZE,
            max_pool_size=settings.DATABASE_MAX_SIZE,
            batch_size=settings.BATCH_SIZE
        )

    logger.warning("[storage] DATABASE_URL not set, using in-memory store")
    return InMemoryTransactionRepository(batch_size=settings.BATCH_SIZE)


async def open_repository(app: FastAPI) -> ITransactionRepository:
    """Create and connect the application's repository (once per app)"""

    repository = getattr(app.state, "repository", None)
    if repository is not None:
        return repository

    # Concurrent first requests must share one pool
    async with app.state.repository_lock:
        if app.state.repository is None:
            repository = build_repository(app.state.settings)
            await repository.connect()
            app.state.repository = repository
        return app.state.repository


async def close_repository(app: FastAPI):
    """Close repository connections"""

    repository = getattr(app.state, "repository", None)
    if repository is not None:
        await repository.close()
        app.state.repository = None


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_repository(request: Request) -> ITransactionRepository:
    """Get the connected repository for this app"""
    return await open_repository(request.app)


@lru_cache()
def get_csv_parser() -> ICSVParser:
    """Get CSV parser implementation"""
    return CSVTransactionParser()


def get_upload_use_case(
    repository: ITransactionRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings)
) -> UploadTransactionsUseCase:
    """Get upload use case with injected dependencies"""

    return UploadTransactionsUseCase(
        csv_parser=get_csv_parser(),
        repository=repository,
        max_file_size=settings.MAX_UPLOAD_SIZE
    )


def get_list_use_case(
    repository: ITransactionRepository = Depends(get_repository)
) -> ListTransactionsUseCase:
    return ListTransactionsUseCase(repository=repository)


def get_balance_use_case(
    repository: ITransactionRepository = Depends(get_repository)
) -> GetBalanceUseCase:
    return GetBalanceUseCase(repository=repository)
