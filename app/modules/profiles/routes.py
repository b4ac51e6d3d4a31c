from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.core.dependencies import get_current_user_id
from app.modules.profiles.schemas import (
    ProfileResponse, ProfileWithProjects, ProfileSummary, ProfileUpdate,
    ImageUrlRequest, BannerUpdateResponse,
)
from app.modules.profiles.service import ProfileService
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(supabase: Client = Depends(get_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return service.get_profile(user["id"])


@router.put("/me", response_model=ProfileResponse)
async def update_my_profile(
    profile_data: ProfileUpdate,
    user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    """Settings form save."""
    return service.update_profile(user["id"], profile_data)


@router.put("/me/avatar", response_model=ProfileResponse)
async def set_avatar(
    body: ImageUrlRequest,
    user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return service.set_avatar(user["id"], body.url)


@router.put("/me/banner", response_model=BannerUpdateResponse)
async def set_banner(
    body: ImageUrlRequest,
    user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return service.set_banner(user["id"], body.url)


@router.get("/id/{user_id}", response_model=ProfileResponse)
async def get_profile(user_id: str, service: ProfileService = Depends(get_profile_service)):
    return service.get_profile(user_id)


@router.get("/id/{user_id}/summary", response_model=ProfileSummary)
async def get_profile_summary(user_id: str, service: ProfileService = Depends(get_profile_service)):
    """Hover-card data: profile plus project count, total likes and total views."""
    return service.get_summary(user_id)


@router.get("/{username}", response_model=ProfileWithProjects)
async def get_profile_by_username(username: str, service: ProfileService = Depends(get_profile_service)):
    return service.get_profile_by_username(username)
