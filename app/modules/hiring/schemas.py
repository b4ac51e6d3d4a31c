from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any, Literal
from datetime import date, datetime
from app.modules.projects.schemas import ProjectResponse

HirePostStatus = Literal["draft", "published", "in-progress", "completed", "cancelled"]


class HirePostCreate(BaseModel):
    title: str
    description: str
    budget: float = Field(..., gt=0)
    category: Optional[str] = None
    skills_required: List[str] = []
    deadline: Optional[date] = None

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Please fill in all required fields")
        return v


class HirePostStatusUpdate(BaseModel):
    status: HirePostStatus


class HirePostResponse(BaseModel):
    id: str
    client_id: str
    title: str
    description: str
    budget: float
    status: HirePostStatus
    category: Optional[str] = None
    skills_required: List[str] = []
    proposals_count: int = 0
    deadline: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HireStats(BaseModel):
    total_projects: int
    active_projects: int
    completed_projects: int
    total_budget: float
    average_project_value: float


class FreelancerProfile(BaseModel):
    profile: Dict[str, Any]
    projects: List[ProjectResponse]
    project_count: int
    service_badges: List[str]


class FreelancerDirectory(BaseModel):
    freelancers: List[FreelancerProfile]
    locations: List[str]
