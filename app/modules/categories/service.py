from supabase import Client
from app.core.errors import backend_http_error
from app.modules.categories.schemas import CategoryResponse
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

VIDEO_CATEGORY_NAMES = ("edited video", "motion")

# Checked in order; first keyword found in the lowercased name wins
_KIND_KEYWORDS = (
    (("design", "graphic"), "design"),
    (("photo",), "photo"),
    (("video", "film"), "video"),
    (("music", "audio"), "music"),
    (("code", "development"), "code"),
)


def is_video_category(name: Optional[str]) -> bool:
    """Only these categories accept video uploads."""
    return bool(name) and name.strip().lower() in VIDEO_CATEGORY_NAMES


def category_kind(name: Optional[str]) -> str:
    """Icon kind used by notifications for a category name."""
    lowered = (name or "").lower()
    for keywords, kind in _KIND_KEYWORDS:
        if any(k in lowered for k in keywords):
            return kind
    return "other"


class CategoryService:
    ORDER_FIELDS = ("created_at", "name")

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_categories(self, order_by: str = "created_at") -> List[CategoryResponse]:
        """List categories; the feed filter bar orders by created_at, the upload form by name."""
        if order_by not in self.ORDER_FIELDS:
            raise HTTPException(status_code=400, detail=f"order_by must be one of {', '.join(self.ORDER_FIELDS)}")
        try:
            result = self.supabase.table("categories").select("*").order(order_by).execute()
            return [CategoryResponse(**c) for c in (result.data or [])]
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading categories")

    def get_category(self, category_id: str) -> CategoryResponse:
        try:
            result = self.supabase.table("categories")\
                .select("*")\
                .eq("id", category_id)\
                .maybe_single()\
                .execute()
            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Category not found")
            return CategoryResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading category")
