"""API routers package."""

from fintrack.api.routers.dashboard import router as dashboard_router
from fintrack.api.routers.entries import income_router, expenses_router
from fintrack.api.routers.categories import router as categories_router
from fintrack.api.routers.goals import router as goals_router
from fintrack.api.routers.reports import router as reports_router

__all__ = [
    "dashboard_router",
    "income_router",
    "expenses_router",
    "categories_router",
    "goals_router",
    "reports_router",
]
