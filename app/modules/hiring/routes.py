from fastapi import APIRouter, Depends, Query
from app.database.supabase_client import get_supabase
from app.core.dependencies import get_current_user_id
from app.modules.hiring.schemas import (
    HirePostCreate, HirePostResponse, HirePostStatusUpdate, HireStats, FreelancerDirectory,
)
from app.modules.hiring.service import HiringService
from supabase import Client
from typing import Dict, List, Optional

router = APIRouter(prefix="/hiring", tags=["hiring"])


def get_hiring_service(supabase: Client = Depends(get_supabase)) -> HiringService:
    return HiringService(supabase)


@router.post("/posts", response_model=HirePostResponse, status_code=201)
async def create_post(
    post_data: HirePostCreate,
    user: Dict = Depends(get_current_user_id),
    service: HiringService = Depends(get_hiring_service),
):
    """Create a hiring project; it starts as a draft."""
    return service.create_post(post_data, user["id"])


@router.get("/posts", response_model=List[HirePostResponse])
async def list_posts(
    search: Optional[str] = None,
    status: str = Query("all", pattern="^(all|draft|published|in-progress|completed|cancelled)$"),
    user: Dict = Depends(get_current_user_id),
    service: HiringService = Depends(get_hiring_service),
):
    return service.list_posts(user["id"], search, status)


@router.get("/stats", response_model=HireStats)
async def get_stats(
    user: Dict = Depends(get_current_user_id),
    service: HiringService = Depends(get_hiring_service),
):
    return service.get_stats(user["id"])


@router.patch("/posts/{post_id}/status", response_model=HirePostResponse)
async def update_status(
    post_id: str,
    body: HirePostStatusUpdate,
    user: Dict = Depends(get_current_user_id),
    service: HiringService = Depends(get_hiring_service),
):
    return service.update_status(post_id, body.status, user["id"])


@router.get("/freelancers", response_model=FreelancerDirectory)
async def discover_freelancers(
    search: Optional[str] = None,
    service_name: Optional[str] = Query(None, alias="service"),
    location: Optional[str] = None,
    availability: str = Query("all", pattern="^(all|available|busy)$"),
    service: HiringService = Depends(get_hiring_service),
):
    """Freelancer directory (public)."""
    return service.discover_freelancers(search, service_name, location, availability)
