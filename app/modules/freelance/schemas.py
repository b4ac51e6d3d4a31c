from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal
from datetime import date, datetime

FreelanceStatus = Literal["active", "pending", "completed", "on-hold"]
Priority = Literal["low", "medium", "high", "urgent"]


class FreelanceProjectCreate(BaseModel):
    title: str
    client: str
    status: FreelanceStatus = "pending"
    priority: Priority = "medium"
    progress: int = Field(0, ge=0, le=100)
    budget: float = Field(0, ge=0)
    deadline: Optional[date] = None
    description: Optional[str] = None
    category: Optional[str] = None
    deliverables: List[str] = []
    tags: List[str] = []

    @field_validator("title", "client")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title and client are required")
        return v


class FreelanceProjectUpdate(BaseModel):
    title: Optional[str] = None
    client: Optional[str] = None
    status: Optional[FreelanceStatus] = None
    priority: Optional[Priority] = None
    progress: Optional[int] = Field(None, ge=0, le=100)
    budget: Optional[float] = Field(None, ge=0)
    deadline: Optional[date] = None
    description: Optional[str] = None
    category: Optional[str] = None
    deliverables: Optional[List[str]] = None
    tags: Optional[List[str]] = None


class FreelanceProjectResponse(BaseModel):
    id: str
    user_id: str
    title: str
    client: str
    status: FreelanceStatus
    priority: Priority
    progress: int = 0
    budget: float = 0
    deadline: Optional[date] = None
    description: Optional[str] = None
    category: Optional[str] = None
    deliverables: List[str] = []
    tags: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FreelanceStats(BaseModel):
    total: int
    active: int
    pending: int
    completed: int
    on_hold: int
    active_budget: float
    average_progress: float
