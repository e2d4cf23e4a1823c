"""Dashboard Route - admin overview counters (fixed mock figures)."""

from fastapi import APIRouter

from autoconnect.services.dashboard_service import get_dashboard_stats

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("")
async def dashboard_stats():
    return {"success": True, "data": get_dashboard_stats()}
