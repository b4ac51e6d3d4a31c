from pydantic import BaseModel
from typing import List


class MonthlyPoint(BaseModel):
    month: str  # YYYY-MM
    views: int
    likes: int
    projects: int


class CategoryStat(BaseModel):
    name: str
    count: int
    value: float  # percentage of the user's projects


class TopProject(BaseModel):
    id: str
    name: str
    views: int
    likes: int
    engagement: float  # likes / views * 100


class AnalyticsDashboard(BaseModel):
    total_views: int
    total_likes: int
    total_projects: int
    followers: int
    engagement_rate: float
    monthly: List[MonthlyPoint]
    categories: List[CategoryStat]
    top_projects: List[TopProject]
