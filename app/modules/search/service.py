import asyncio
from supabase import Client
from app.config import settings
from app.core.errors import backend_http_error
from app.modules.projects import feed
from app.modules.projects.schemas import FeedFilters, ProjectResponse
from app.modules.search import recent_searches
from app.modules.search.schemas import SearchSuggestions, SearchRequest, SearchResponse
from fastapi import HTTPException
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class SearchService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _project_matches(self, term: str):
        return self.supabase.table("projects")\
            .select(feed.FEED_SELECT)\
            .or_(f"title.ilike.%{term}%,description.ilike.%{term}%")\
            .limit(settings.suggestion_project_limit)\
            .execute()

    def _user_matches(self, term: str):
        return self.supabase.table("profiles")\
            .select("*")\
            .or_(f"username.ilike.%{term}%,full_name.ilike.%{term}%")\
            .limit(settings.suggestion_user_limit)\
            .execute()

    def _category_matches(self, term: str):
        return self.supabase.table("categories")\
            .select("*")\
            .ilike("name", f"%{term}%")\
            .limit(settings.suggestion_category_limit)\
            .execute()

    async def get_suggestions(self, query: str) -> SearchSuggestions:
        """Projects, users and categories matching the query, fetched concurrently."""
        term = feed.escape_like((query or "").strip())
        if len(term) < settings.suggestion_min_query_length:
            return SearchSuggestions()
        try:
            projects, users, categories = await asyncio.gather(
                asyncio.to_thread(self._project_matches, term),
                asyncio.to_thread(self._user_matches, term),
                asyncio.to_thread(self._category_matches, term),
            )
            return SearchSuggestions(
                projects=[ProjectResponse(**p) for p in (projects.data or [])],
                users=users.data or [],
                categories=categories.data or [],
            )
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error fetching suggestions")

    def submit_search(self, request: SearchRequest, user_id: Optional[str]) -> SearchResponse:
        """Record the query for the user and return the feed URL params it maps to."""
        query = request.query.strip()
        if not query:
            raise HTTPException(status_code=400, detail="Search query cannot be empty")
        filters = FeedFilters(
            search=query,
            category_id=request.category_id,
            sort=request.sort,
            date_range=request.date_range,
            media_type=request.media_type,
        )
        recent = recent_searches.record(user_id, query) if user_id else []
        return SearchResponse(
            query=query,
            query_params=feed.to_query_params(filters),
            active_filter_count=feed.active_filter_count(filters),
            recent_searches=recent,
        )
