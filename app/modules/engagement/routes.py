from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.core.dependencies import get_current_user_id, require_user
from app.modules.engagement.schemas import LikeStatus, SaveStatus, CommentCreate, CommentResponse
from app.modules.engagement.service import EngagementService
from app.modules.projects.schemas import ProjectResponse
from supabase import Client
from typing import Dict, List

router = APIRouter(tags=["engagement"])

require_login_to_like = require_user("Please log in to like projects")
require_login_to_save = require_user("Please log in to save projects")
require_login_to_comment = require_user("Please log in to comment")


def get_engagement_service(supabase: Client = Depends(get_supabase)) -> EngagementService:
    return EngagementService(supabase)


@router.post("/projects/{project_id}/like", response_model=LikeStatus)
async def like_project(
    project_id: str,
    user: Dict = Depends(require_login_to_like),
    service: EngagementService = Depends(get_engagement_service),
):
    return service.set_like(project_id, user["id"], True)


@router.delete("/projects/{project_id}/like", response_model=LikeStatus)
async def unlike_project(
    project_id: str,
    user: Dict = Depends(require_login_to_like),
    service: EngagementService = Depends(get_engagement_service),
):
    return service.set_like(project_id, user["id"], False)


@router.post("/projects/{project_id}/save", response_model=SaveStatus)
async def save_project(
    project_id: str,
    user: Dict = Depends(require_login_to_save),
    service: EngagementService = Depends(get_engagement_service),
):
    return service.set_save(project_id, user["id"], True)


@router.delete("/projects/{project_id}/save", response_model=SaveStatus)
async def unsave_project(
    project_id: str,
    user: Dict = Depends(require_login_to_save),
    service: EngagementService = Depends(get_engagement_service),
):
    return service.set_save(project_id, user["id"], False)


@router.get("/users/me/saved", response_model=List[ProjectResponse])
async def list_saved(
    user: Dict = Depends(get_current_user_id),
    service: EngagementService = Depends(get_engagement_service),
):
    return service.list_saved_projects(user["id"])


@router.get("/projects/{project_id}/comments", response_model=List[CommentResponse])
async def list_comments(project_id: str, service: EngagementService = Depends(get_engagement_service)):
    return service.list_comments(project_id)


@router.post("/projects/{project_id}/comments", response_model=CommentResponse, status_code=201)
async def add_comment(
    project_id: str,
    comment: CommentCreate,
    user: Dict = Depends(require_login_to_comment),
    service: EngagementService = Depends(get_engagement_service),
):
    return service.add_comment(project_id, user["id"], comment.content)


@router.delete("/projects/{project_id}/comments/{comment_id}", status_code=204)
async def delete_comment(
    project_id: str,
    comment_id: str,
    user: Dict = Depends(get_current_user_id),
    service: EngagementService = Depends(get_engagement_service),
):
    service.delete_comment(project_id, comment_id, user["id"])
