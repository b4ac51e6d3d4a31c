from fastapi import APIRouter, Depends, Query
from app.database.supabase_client import get_supabase
from app.modules.categories.schemas import CategoryResponse
from app.modules.categories.service import CategoryService
from supabase import Client
from typing import List

router = APIRouter(prefix="/categories", tags=["categories"])


def get_category_service(supabase: Client = Depends(get_supabase)) -> CategoryService:
    return CategoryService(supabase)


@router.get("", response_model=List[CategoryResponse])
async def list_categories(
    order_by: str = Query("created_at", pattern="^(created_at|name)$"),
    service: CategoryService = Depends(get_category_service),
):
    """List all categories"""
    return service.list_categories(order_by)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str, service: CategoryService = Depends(get_category_service)):
    return service.get_category(category_id)
