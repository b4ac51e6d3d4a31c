from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from app.database.supabase_client import get_supabase
from app.core.dependencies import get_current_user_id
from app.modules.assets.schemas import AssetResponse
from app.modules.assets.service import AssetService
from supabase import Client
from typing import Dict, List, Optional

router = APIRouter(prefix="/assets", tags=["assets"])


def get_asset_service(supabase: Client = Depends(get_supabase)) -> AssetService:
    return AssetService(supabase)


def _zip_response(filename: str, data: bytes) -> Response:
    return Response(
        content=data,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("", response_model=List[AssetResponse])
async def list_assets(
    media: str = Query("all", pattern="^(all|images|videos)$"),
    search: Optional[str] = None,
    user: Dict = Depends(get_current_user_id),
    service: AssetService = Depends(get_asset_service),
):
    return service.list_assets(user["id"], media, search)


@router.get("/download")
async def download_all(
    user: Dict = Depends(get_current_user_id),
    service: AssetService = Depends(get_asset_service),
):
    """Every asset in one ZIP, one folder per project."""
    return _zip_response(*service.build_collection(user["id"]))


@router.get("/{project_id}/download")
async def download_asset(
    project_id: str,
    user: Dict = Depends(get_current_user_id),
    service: AssetService = Depends(get_asset_service),
):
    """ZIP with project.<ext>, title.txt and description.txt."""
    return _zip_response(*service.build_bundle(project_id, user["id"]))
