from fastapi import APIRouter, Depends, Query
from app.database.supabase_client import get_supabase
from app.core.dependencies import get_current_user_id
from app.modules.freelance.schemas import (
    FreelanceProjectCreate, FreelanceProjectUpdate, FreelanceProjectResponse, FreelanceStats,
)
from app.modules.freelance.service import FreelanceService
from supabase import Client
from typing import Dict, List, Optional

router = APIRouter(prefix="/freelance", tags=["freelance"])


def get_freelance_service(supabase: Client = Depends(get_supabase)) -> FreelanceService:
    return FreelanceService(supabase)


@router.post("/projects", response_model=FreelanceProjectResponse, status_code=201)
async def create_project(
    project_data: FreelanceProjectCreate,
    user: Dict = Depends(get_current_user_id),
    service: FreelanceService = Depends(get_freelance_service),
):
    return service.create_project(project_data, user["id"])


@router.get("/projects", response_model=List[FreelanceProjectResponse])
async def list_projects(
    search: Optional[str] = None,
    status: str = Query("all", pattern="^(all|active|pending|completed|on-hold)$"),
    user: Dict = Depends(get_current_user_id),
    service: FreelanceService = Depends(get_freelance_service),
):
    return service.list_projects(user["id"], search, status)


@router.get("/stats", response_model=FreelanceStats)
async def get_stats(
    user: Dict = Depends(get_current_user_id),
    service: FreelanceService = Depends(get_freelance_service),
):
    return service.get_stats(user["id"])


@router.get("/projects/{project_id}", response_model=FreelanceProjectResponse)
async def get_project(
    project_id: str,
    user: Dict = Depends(get_current_user_id),
    service: FreelanceService = Depends(get_freelance_service),
):
    return service.get_project(project_id, user["id"])


@router.patch("/projects/{project_id}", response_model=FreelanceProjectResponse)
async def update_project(
    project_id: str,
    project_data: FreelanceProjectUpdate,
    user: Dict = Depends(get_current_user_id),
    service: FreelanceService = Depends(get_freelance_service),
):
    return service.update_project(project_id, project_data, user["id"])


@router.delete("/projects/{project_id}", status_code=204)
async def delete_project(
    project_id: str,
    user: Dict = Depends(get_current_user_id),
    service: FreelanceService = Depends(get_freelance_service),
):
    service.delete_project(project_id, user["id"])
