"""
FastAPI Application: Hexagonal Architecture
Main entry point for the Transaction Ledger API
"""

import asyncio
import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from api.v1.errors import error_response
from api.v1.routes import health, transactions, upload
from api.v1.dependencies import open_repository, close_repository
from config import Settings
from domain.exceptions import RepositoryError


logger = logging.getLogger(__name__)


def configure_logging(settings: Settings):
    """Configure root logging from settings"""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s"
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around one Settings object"""

    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Transaction Ledger API",
        description="CSV ingestion and querying of bank transactions",
        version=settings.SERVICE_VERSION,
        debug=settings.DEBUG,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.settings = settings
    app.state.repository = None
    app.state.repository_lock = asyncio.Lock()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials="*" not in settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_http_requests(request: Request, call_next):
        """Log method, path, status and duration of every request"""

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"[http] failed method={request.method} path={request.url.path}"
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"[http] method={request.method} path={request.url.path} "
            f"status={response.status_code} duration_ms={elapsed_ms:.1f}"
        )
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
        """Answer 500 for anything the routes did not handle"""

        logger.error(
            f"[http] unhandled {type(exc).__name__} path={request.url.path}: {exc}",
            exc_info=exc
        )
        return error_response(500, "Internal server error", str(exc))

    @app.on_event("startup")
    async def startup_event():
        """Open the repository on startup"""
        try:
            repository = await open_repository(app)
        except RepositoryError as e:
            logger.warning(f"[startup] {e}; requests needing storage will fail until it is reachable")
            return

        healthy = await repository.health_check()
        logger.info(
            f"[startup] {settings.SERVICE_NAME} {settings.SERVICE_VERSION} "
            f"storage_healthy={healthy}"
        )

    @app.on_event("shutdown")
    async def shutdown_event():
        """Close repository connections on shutdown"""
        await close_repository(app)
        logger.info("[shutdown] repository closed")

    # Include routers
    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(upload.router, prefix="/api", tags=["Upload"])
    app.include_router(transactions.router, prefix="/api", tags=["Transactions"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": settings.SERVICE_NAME,
            "version": settings.SERVICE_VERSION,
            "docs": "/docs",
            "health": "/api/health"
        }

    return app


settings = Settings.from_env()
configure_logging(settings)
app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
