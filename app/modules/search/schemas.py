from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from app.modules.projects.schemas import ProjectResponse, SortKey, DateRange, MediaType


class SearchSuggestions(BaseModel):
    projects: List[ProjectResponse] = []
    users: List[Dict[str, Any]] = []
    categories: List[Dict[str, Any]] = []


class SearchRequest(BaseModel):
    query: str
    category_id: Optional[str] = None
    sort: SortKey = "relevance"
    date_range: DateRange = "all"
    media_type: MediaType = "all"


class SearchResponse(BaseModel):
    query: str
    query_params: Dict[str, str]
    active_filter_count: int
    recent_searches: List[str]


class RecentSearchesResponse(BaseModel):
    recent_searches: List[str]
