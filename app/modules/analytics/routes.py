from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.core.dependencies import get_current_user_id
from app.modules.analytics.schemas import AnalyticsDashboard
from app.modules.analytics.service import AnalyticsService
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/analytics", tags=["analytics"])


def get_analytics_service(supabase: Client = Depends(get_supabase)) -> AnalyticsService:
    return AnalyticsService(supabase)


@router.get("/me", response_model=AnalyticsDashboard)
async def get_my_analytics(
    user: Dict = Depends(get_current_user_id),
    service: AnalyticsService = Depends(get_analytics_service),
):
    return service.get_dashboard(user["id"])
