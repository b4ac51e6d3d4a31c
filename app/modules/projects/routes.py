from fastapi import APIRouter, Depends, Query
from app.config import settings
from app.database.supabase_client import get_supabase
from app.core.dependencies import get_current_user_id, get_optional_user, require_user
from app.modules.projects.schemas import (
    FeedFilters, FeedResponse, ProjectCreate, ProjectUpdate, ProjectResponse, ImageReplaceRequest,
)
from app.modules.projects.service import ProjectService
from supabase import Client
from typing import Dict, List, Optional

router = APIRouter(prefix="/projects", tags=["projects"])


def get_project_service(supabase: Client = Depends(get_supabase)) -> ProjectService:
    return ProjectService(supabase)


def _viewer_id(user: Optional[Dict]) -> Optional[str]:
    return user["id"] if user else None


@router.get("", response_model=FeedResponse)
async def get_feed(
    search: Optional[str] = None,
    category: Optional[str] = None,
    sort: str = Query("relevance", pattern="^(relevance|newest|oldest|most_liked|most_saved|most_commented)$"),
    date: str = Query("all", pattern="^(all|today|week|month|year)$"),
    media: str = Query("all", pattern="^(all|images|videos)$"),
    best_of: bool = False,
    limit: int = Query(settings.feed_page_size, ge=1, le=settings.feed_max_page_size),
    offset: int = Query(0, ge=0),
    user: Optional[Dict] = Depends(get_optional_user),
    service: ProjectService = Depends(get_project_service),
):
    """
    Project feed. Query params use the same names as the frontend URL
    (search, category, sort, date, media) so a feed URL can be replayed as-is.
    """
    filters = FeedFilters(
        search=search, category_id=category, sort=sort, date_range=date,
        media_type=media, best_of=best_of, limit=limit, offset=offset,
    )
    return service.get_feed(filters, _viewer_id(user))


@router.post("", response_model=ProjectResponse, status_code=201)
async def create_project(
    project_data: ProjectCreate,
    user: Dict = Depends(require_user("Please log in to upload projects")),
    service: ProjectService = Depends(get_project_service),
):
    return service.create_project(project_data, user["id"])


@router.get("/user/{user_id}", response_model=List[ProjectResponse])
async def list_user_projects(
    user_id: str,
    user: Optional[Dict] = Depends(get_optional_user),
    service: ProjectService = Depends(get_project_service),
):
    return service.list_user_projects(user_id, _viewer_id(user))


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    user: Optional[Dict] = Depends(get_optional_user),
    service: ProjectService = Depends(get_project_service),
):
    return service.get_project(project_id, _viewer_id(user))


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    user: Dict = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    return service.update_project(project_id, project_data, user["id"])


@router.put("/{project_id}/image", response_model=ProjectResponse)
async def replace_image(
    project_id: str,
    body: ImageReplaceRequest,
    user: Dict = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    return service.replace_image(project_id, body.media_url, user["id"], body.file_size)


@router.delete("/{project_id}/image", response_model=ProjectResponse)
async def delete_image(
    project_id: str,
    user: Dict = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    """Delete the stored media; the project keeps a placeholder image."""
    return service.delete_image(project_id, user["id"])


@router.delete("/{project_id}", status_code=204)
async def delete_project(
    project_id: str,
    user: Dict = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    service.delete_project(project_id, user["id"])
