from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any, Literal
from datetime import datetime

SortKey = Literal["relevance", "newest", "oldest", "most_liked", "most_saved", "most_commented"]
DateRange = Literal["all", "today", "week", "month", "year"]
MediaType = Literal["all", "images", "videos"]


class FeedFilters(BaseModel):
    search: Optional[str] = None
    category_id: Optional[str] = None
    sort: SortKey = "relevance"
    date_range: DateRange = "all"
    media_type: MediaType = "all"
    best_of: bool = False
    limit: int = Field(24, ge=1)
    offset: int = Field(0, ge=0)

    @field_validator("search", "category_id")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


class ProjectCreate(BaseModel):
    title: str
    description: Optional[str] = None
    category_id: Optional[str] = None
    media_url: str  # public URL of an object already uploaded to storage
    file_size: Optional[int] = Field(None, ge=0)  # bytes, as reported by the uploader

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v


class ProjectUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("Title cannot be empty")
        return v


class ImageReplaceRequest(BaseModel):
    media_url: str
    file_size: Optional[int] = Field(None, ge=0)


class ProjectResponse(BaseModel):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    category_id: Optional[str] = None
    likes_count: int = 0
    saves_count: int = 0
    comments_count: int = 0
    views_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    profiles: Optional[Dict[str, Any]] = None
    categories: Optional[Dict[str, Any]] = None
    is_liked: bool = False
    is_saved: bool = False
    rank: Optional[int] = None

    class Config:
        from_attributes = True


class FeedResponse(BaseModel):
    items: List[ProjectResponse]
    total: int
    limit: int
    offset: int
    query_params: Dict[str, str]
    active_filter_count: int
