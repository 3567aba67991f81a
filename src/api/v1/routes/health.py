"""
API Routes: Health Check
"""

from fastapi import APIRouter, Depends

from api.v1.schemas import HealthResponse
from api.v1.dependencies import get_repository, get_settings
from application.ports.transaction_repository import ITransactionRepository
from config import Settings
from infrastructure.database import PostgresTransactionRepository


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    repository: ITransactionRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings)
):
    """Health check endpoint"""

    storage_type = (
        "postgres" if isinstance(repository, PostgresTransactionRepository) else "memory"
    )

    healthy = await repository.health_check()
    database_status = "connected" if healthy else "unavailable"

    return HealthResponse(
        status="healthy" if healthy else "degraded",
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        storage_type=storage_type,
        database_status=database_status
    )
