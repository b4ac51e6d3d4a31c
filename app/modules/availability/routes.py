from fastapi import APIRouter, Depends, Body
from app.config.availability_options import get_availability_options
from app.database.supabase_client import get_supabase
from app.core.dependencies import get_current_user_id
from app.modules.availability.schemas import (
    AvailabilitySettings, AvailabilityResponse, AvailabilitySaveResponse, ToggleRequest,
)
from app.modules.availability.service import AvailabilityService
from supabase import Client
from typing import Dict, Any

router = APIRouter(prefix="/availability", tags=["availability"])


def get_availability_service(supabase: Client = Depends(get_supabase)) -> AvailabilityService:
    return AvailabilityService(supabase)


@router.get("/options")
async def get_options():
    """Option lists for the availability editor (timezones, currencies, skills, ...)."""
    return get_availability_options()


@router.get("/me", response_model=AvailabilityResponse)
async def get_my_availability(
    user: Dict = Depends(get_current_user_id),
    service: AvailabilityService = Depends(get_availability_service),
):
    return service.get_settings(user["id"])


@router.put("/me", response_model=AvailabilitySaveResponse)
async def save_my_availability(
    settings: AvailabilitySettings,
    user: Dict = Depends(get_current_user_id),
    service: AvailabilityService = Depends(get_availability_service),
):
    return service.save_settings(user["id"], settings)


@router.patch("/me", response_model=AvailabilitySaveResponse)
async def update_my_availability(
    changes: Dict[str, Any] = Body(...),
    user: Dict = Depends(get_current_user_id),
    service: AvailabilityService = Depends(get_availability_service),
):
    """Partial update; unknown keys are ignored."""
    known = {k: v for k, v in changes.items() if k in AvailabilitySettings.model_fields}
    return service.update_settings(user["id"], known)


@router.post("/me/toggle", response_model=AvailabilitySaveResponse)
async def toggle_option(
    request: ToggleRequest,
    user: Dict = Depends(get_current_user_id),
    service: AvailabilityService = Depends(get_availability_service),
):
    return service.toggle_value(user["id"], request.field, request.value)
