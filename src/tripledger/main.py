"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tripledger.config.settings import get_settings
from tripledger.config.logging_config import setup_logging
from tripledger.repositories.sqlalchemy.database import init_db, reset_database
from tripledger.api.routers import expenses_router, balances_router, rates_router
from tripledger.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield
    # Shutdown
    reset_database()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Shared trip expenses with multi-currency normalization and running balances",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(expenses_router)
app.include_router(balances_router)
app.include_router(rates_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "accounting_currency": settings.get_accounting_currency(),
        "docs": "/docs",
    }
