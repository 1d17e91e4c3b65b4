"""Dashboard statistics endpoints."""

from fastapi import APIRouter, Depends

from fintrack.api.deps import get_current_user_id, get_stats_aggregator
from fintrack.api.schemas import DashboardStatsResponse
from fintrack.services import StatsAggregator

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    user_id: str = Depends(get_current_user_id),
    aggregator: StatsAggregator = Depends(get_stats_aggregator),
) -> DashboardStatsResponse:
    """Get all-time and current-month totals (cached for a few minutes)."""
    stats = await aggregator.get_stats(user_id)
    return DashboardStatsResponse.model_validate(stats)


@router.post("/stats/refresh", response_model=DashboardStatsResponse)
async def refresh_dashboard_stats(
    user_id: str = Depends(get_current_user_id),
    aggregator: StatsAggregator = Depends(get_stats_aggregator),
) -> DashboardStatsResponse:
    """Recompute totals, bypassing the cached snapshot."""
    stats = await aggregator.refresh(user_id)
    return DashboardStatsResponse.model_validate(stats)
