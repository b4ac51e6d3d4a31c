from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.core.dependencies import get_current_user_id, get_optional_user
from app.modules.search import recent_searches
from app.modules.search.schemas import (
    SearchSuggestions, SearchRequest, SearchResponse, RecentSearchesResponse,
)
from app.modules.search.service import SearchService
from supabase import Client
from typing import Dict, Optional

router = APIRouter(prefix="/search", tags=["search"])


def get_search_service(supabase: Client = Depends(get_supabase)) -> SearchService:
    return SearchService(supabase)


@router.get("/suggestions", response_model=SearchSuggestions)
async def get_suggestions(q: str = "", service: SearchService = Depends(get_search_service)):
    """Typeahead suggestions; empty until the query has at least two characters."""
    return await service.get_suggestions(q)


@router.post("", response_model=SearchResponse)
async def submit_search(
    request: SearchRequest,
    user: Optional[Dict] = Depends(get_optional_user),
    service: SearchService = Depends(get_search_service),
):
    return service.submit_search(request, user["id"] if user else None)


@router.get("/recent", response_model=RecentSearchesResponse)
async def list_recent(user: Dict = Depends(get_current_user_id)):
    return RecentSearchesResponse(recent_searches=recent_searches.list_recent(user["id"]))


@router.delete("/recent", status_code=204)
async def clear_recent(user: Dict = Depends(get_current_user_id)):
    recent_searches.clear(user["id"])
