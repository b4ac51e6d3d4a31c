from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime
from app.modules.projects.schemas import ProjectResponse

MIN_USERNAME_LENGTH = 3


class ProfileResponse(BaseModel):
    id: str
    username: str
    full_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    banner_url: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    is_available: Optional[bool] = None
    followers_count: Optional[int] = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProfileWithProjects(BaseModel):
    profile: ProfileResponse
    projects: List[ProjectResponse]


class ProfileSummary(BaseModel):
    """Hover-card data."""
    profile: ProfileResponse
    project_count: int
    total_likes: int
    total_views: int


class ProfileUpdate(BaseModel):
    username: str
    full_name: Optional[str] = ""
    bio: Optional[str] = ""
    avatar_url: Optional[str] = ""
    banner_url: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None

    @field_validator("username")
    @classmethod
    def username_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < MIN_USERNAME_LENGTH:
            raise ValueError(f"Username must be at least {MIN_USERNAME_LENGTH} characters long")
        return v


class ImageUrlRequest(BaseModel):
    url: str


class BannerUpdateResponse(BaseModel):
    banner_url: str
    persisted: bool
    message: str
