from supabase import Client
from app.core.dependencies import ensure_owner
from app.core.errors import backend_http_error
from app.modules.hiring.schemas import (
    HirePostCreate, HirePostResponse, HireStats, FreelancerProfile, FreelancerDirectory,
)
from app.modules.projects.schemas import ProjectResponse
from collections import defaultdict
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

ACTIVE_STATUSES = ("published", "in-progress")
FREELANCER_PROJECT_LIMIT = 6
SERVICE_BADGE_LIMIT = 5


def _contains(value: Optional[str], term: str) -> bool:
    return term in (value or "").lower()


def service_badges(projects: List[Dict[str, Any]]) -> List[str]:
    """Distinct category names of the projects, in order, at most five."""
    badges: List[str] = []
    for p in projects:
        name = (p.get("categories") or {}).get("name")
        if name and name not in badges:
            badges.append(name)
    return badges[:SERVICE_BADGE_LIMIT]


def filter_freelancers(
    freelancers: List[FreelancerProfile],
    search: Optional[str] = None,
    service: Optional[str] = None,
    location: Optional[str] = None,
    availability: str = "all",
) -> List[FreelancerProfile]:
    result = freelancers
    if search:
        term = search.lower()
        result = [
            f for f in result
            if _contains(f.profile.get("full_name"), term)
            or _contains(f.profile.get("username"), term)
            or _contains(f.profile.get("bio"), term)
        ]
    if service and service != "all":
        term = service.lower()
        result = [
            f for f in result
            if any(_contains((p.categories or {}).get("name"), term) for p in f.projects)
        ]
    if location and location != "all":
        term = location.lower()
        result = [f for f in result if _contains(f.profile.get("location"), term)]
    if availability == "available":
        result = [f for f in result if f.profile.get("is_available")]
    elif availability == "busy":
        result = [f for f in result if not f.profile.get("is_available")]
    return result


class HiringService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_post(self, data: HirePostCreate, client_id: str) -> HirePostResponse:
        try:
            insert_data = data.model_dump(mode="json")
            insert_data.update({"client_id": client_id, "status": "draft"})
            result = self.supabase.table("hire_posts").insert(insert_data).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create project")
            return HirePostResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error creating hire post")

    def _list_rows(self, client_id: str) -> List[Dict[str, Any]]:
        result = self.supabase.table("hire_posts")\
            .select("*")\
            .eq("client_id", client_id)\
            .order("created_at", desc=True)\
            .execute()
        return result.data or []

    def list_posts(self, client_id: str, search: Optional[str] = None, status: str = "all") -> List[HirePostResponse]:
        try:
            rows = self._list_rows(client_id)
            if search:
                term = search.lower()
                rows = [r for r in rows if _contains(r.get("title"), term) or _contains(r.get("description"), term)]
            if status != "all":
                rows = [r for r in rows if r.get("status") == status]
            return [HirePostResponse(**r) for r in rows]
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading hire posts")

    def update_status(self, post_id: str, status: str, user_id: str) -> HirePostResponse:
        try:
            existing = self.supabase.table("hire_posts")\
                .select("*")\
                .eq("id", post_id)\
                .maybe_single()\
                .execute()
            if not existing or not existing.data:
                raise HTTPException(status_code=404, detail="Project not found")
            ensure_owner(existing.data, user_id, "You can only update your own projects", owner_field="client_id")
            result = self.supabase.table("hire_posts").update({
                "status": status,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }).eq("id", post_id).execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Project not found")
            return HirePostResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error updating hire post status")

    def get_stats(self, client_id: str) -> HireStats:
        try:
            rows = self._list_rows(client_id)
            total_budget = float(sum(r.get("budget") or 0 for r in rows))
            return HireStats(
                total_projects=len(rows),
                active_projects=sum(1 for r in rows if r.get("status") in ACTIVE_STATUSES),
                completed_projects=sum(1 for r in rows if r.get("status") == "completed"),
                total_budget=total_budget,
                average_project_value=round(total_budget / len(rows), 2) if rows else 0.0,
            )
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading hiring stats")

    def discover_freelancers(
        self,
        search: Optional[str] = None,
        service: Optional[str] = None,
        location: Optional[str] = None,
        availability: str = "all",
    ) -> FreelancerDirectory:
        """Profiles newest first, each with up to six recent projects, filtered in memory."""
        try:
            profiles = self.supabase.table("profiles")\
                .select("*")\
                .order("created_at", desc=True)\
                .execute()
            profile_rows = profiles.data or []

            by_user: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
            if profile_rows:
                projects = self.supabase.table("projects")\
                    .select("*, categories(*)")\
                    .in_("user_id", [p["id"] for p in profile_rows])\
                    .order("created_at", desc=True)\
                    .execute()
                for row in projects.data or []:
                    by_user[row["user_id"]].append(row)

            freelancers = []
            for profile in profile_rows:
                user_projects = by_user.get(profile["id"], [])
                recent = user_projects[:FREELANCER_PROJECT_LIMIT]
                freelancers.append(FreelancerProfile(
                    profile=profile,
                    projects=[ProjectResponse(**p) for p in recent],
                    project_count=len(user_projects),
                    service_badges=service_badges(recent),
                ))

            locations: List[str] = []
            for profile in profile_rows:
                loc = profile.get("location")
                if loc and loc not in locations:
                    locations.append(loc)

            return FreelancerDirectory(
                freelancers=filter_freelancers(freelancers, search, service, location, availability),
                locations=locations,
            )
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading freelancers")
