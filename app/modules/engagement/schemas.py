from pydantic import BaseModel, field_validator
from typing import Optional, Dict, Any
from datetime import datetime

MAX_COMMENT_LENGTH = 2000


class LikeStatus(BaseModel):
    project_id: str
    liked: bool
    likes_count: int


class SaveStatus(BaseModel):
    project_id: str
    saved: bool
    saves_count: int


class CommentCreate(BaseModel):
    content: str

    @field_validator("content")
    @classmethod
    def content_valid(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Comment cannot be empty")
        if len(v) > MAX_COMMENT_LENGTH:
            raise ValueError(f"Comment must be at most {MAX_COMMENT_LENGTH} characters")
        return v


class CommentResponse(BaseModel):
    id: str
    project_id: str
    user_id: str
    content: str
    created_at: Optional[datetime] = None
    profiles: Optional[Dict[str, Any]] = None

    class Config:
        from_attributes = True
