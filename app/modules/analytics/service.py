from supabase import Client
from app.core.errors import backend_http_error, is_missing_column_error
from app.modules.analytics.schemas import AnalyticsDashboard, MonthlyPoint, CategoryStat, TopProject
from collections import Counter, defaultdict
from typing import List, Dict, Any
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

TOP_PROJECTS_LIMIT = 4
UNCATEGORIZED = "Uncategorized"


def engagement_rate(likes: int, views: int) -> float:
    if not views:
        return 0.0
    return round(likes / views * 100, 1)


def monthly_series(projects: List[Dict[str, Any]]) -> List[MonthlyPoint]:
    buckets: Dict[str, Dict[str, int]] = defaultdict(lambda: {"views": 0, "likes": 0, "projects": 0})
    for p in projects:
        created = str(p.get("created_at") or "")
        if len(created) < 7:
            continue
        bucket = buckets[created[:7]]
        bucket["views"] += p.get("views_count") or 0
        bucket["likes"] += p.get("likes_count") or 0
        bucket["projects"] += 1
    return [MonthlyPoint(month=m, **buckets[m]) for m in sorted(buckets)]


def category_stats(projects: List[Dict[str, Any]]) -> List[CategoryStat]:
    counts = Counter(((p.get("categories") or {}).get("name") or UNCATEGORIZED) for p in projects)
    total = sum(counts.values())
    return [
        CategoryStat(name=name, count=count, value=round(count / total * 100, 1))
        for name, count in counts.most_common()
    ]


def top_projects(projects: List[Dict[str, Any]], limit: int = TOP_PROJECTS_LIMIT) -> List[TopProject]:
    ranked = [
        TopProject(
            id=p["id"],
            name=p.get("title") or "",
            views=p.get("views_count") or 0,
            likes=p.get("likes_count") or 0,
            engagement=engagement_rate(p.get("likes_count") or 0, p.get("views_count") or 0),
        )
        for p in projects
    ]
    ranked.sort(key=lambda t: (t.engagement, t.views), reverse=True)
    return ranked[:limit]


class AnalyticsService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _followers(self, user_id: str) -> int:
        """followers_count is optional in the schema; without it the dashboard shows 0."""
        try:
            profile = self.supabase.table("profiles")\
                .select("followers_count")\
                .eq("id", user_id)\
                .maybe_single()\
                .execute()
        except Exception as e:
            if is_missing_column_error(e):
                logger.warning(f"followers_count unavailable, reporting 0 followers: {e}")
                return 0
            raise
        return ((profile.data if profile else None) or {}).get("followers_count") or 0

    def get_dashboard(self, user_id: str) -> AnalyticsDashboard:
        """Totals, monthly series, category split and top projects for one user."""
        try:
            followers = self._followers(user_id)
            result = self.supabase.table("projects")\
                .select("*, categories(*)")\
                .eq("user_id", user_id)\
                .order("created_at")\
                .execute()
            projects = result.data or []

            total_views = sum(p.get("views_count") or 0 for p in projects)
            total_likes = sum(p.get("likes_count") or 0 for p in projects)
            return AnalyticsDashboard(
                total_views=total_views,
                total_likes=total_likes,
                total_projects=len(projects),
                followers=followers,
                engagement_rate=engagement_rate(total_likes, total_views),
                monthly=monthly_series(projects),
                categories=category_stats(projects),
                top_projects=top_projects(projects),
            )
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading analytics")
