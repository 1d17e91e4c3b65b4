"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fintrack.config.settings import get_settings
from fintrack.config.logging_config import setup_logging
from fintrack.repositories.sqlalchemy.database import init_db
from fintrack.api.routers import (
    dashboard_router,
    income_router,
    expenses_router,
    categories_router,
    goals_router,
    reports_router,
)
from fintrack.core.exceptions import AppError, NotFoundError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield
    # Shutdown (nothing to clean up)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Personal income, expense and savings goal tracking",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(dashboard_router)
app.include_router(income_router)
app.include_router(expenses_router)
app.include_router(categories_router)
app.include_router(goals_router)
app.include_router(reports_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    return JSONResponse(
        status_code=status_code,
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
        "docs": "/docs",
    }
