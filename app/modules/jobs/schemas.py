from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class JobResponse(BaseModel):
    id: str
    title: str
    company: str
    company_logo: Optional[str] = None
    location: str
    type: Optional[str] = None
    description: str
    requirements: List[str] = []
    benefits: List[str] = []
    salary: Optional[str] = None
    is_remote: bool = False
    is_verified: bool = False
    category: Optional[str] = None
    posted_at: Optional[datetime] = None
    is_saved: bool = False

    class Config:
        from_attributes = True


class SavedJobToggle(BaseModel):
    job_id: str
    saved: bool
