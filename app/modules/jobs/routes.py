from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.core.dependencies import get_current_user_id, get_optional_user
from app.modules.jobs.schemas import JobResponse, SavedJobToggle
from app.modules.jobs.service import JobService
from supabase import Client
from typing import Dict, List, Optional

router = APIRouter(prefix="/jobs", tags=["jobs"])


def get_job_service(supabase: Client = Depends(get_supabase)) -> JobService:
    return JobService(supabase)


@router.get("", response_model=List[JobResponse])
async def list_jobs(
    search: Optional[str] = None,
    category: str = "all",
    location: Optional[str] = None,
    user: Optional[Dict] = Depends(get_optional_user),
    service: JobService = Depends(get_job_service),
):
    return service.list_jobs(search, category, location, user["id"] if user else None)


@router.get("/saved", response_model=List[JobResponse])
async def list_saved_jobs(
    user: Dict = Depends(get_current_user_id),
    service: JobService = Depends(get_job_service),
):
    return service.list_saved(user["id"])


@router.post("/{job_id}/save", response_model=SavedJobToggle)
async def toggle_saved_job(
    job_id: str,
    user: Dict = Depends(get_current_user_id),
    service: JobService = Depends(get_job_service),
):
    """Save the job, or unsave it if already saved."""
    return service.toggle_saved(job_id, user["id"])
