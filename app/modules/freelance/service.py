from supabase import Client
from app.core.dependencies import ensure_owner
from app.core.errors import backend_http_error
from app.modules.freelance.schemas import (
    FreelanceProjectCreate, FreelanceProjectUpdate, FreelanceProjectResponse, FreelanceStats,
)
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class FreelanceService:
    """A freelancer's own client projects. Every operation is scoped to the owner."""

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _rows(self, user_id: str) -> List[Dict[str, Any]]:
        result = self.supabase.table("freelance_projects")\
            .select("*")\
            .eq("user_id", user_id)\
            .order("created_at", desc=True)\
            .execute()
        return result.data or []

    def _get_owned(self, project_id: str, user_id: str) -> Dict[str, Any]:
        result = self.supabase.table("freelance_projects")\
            .select("*")\
            .eq("id", project_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Project not found")
        ensure_owner(result.data, user_id, "You can only manage your own projects")
        return result.data

    def create_project(self, data: FreelanceProjectCreate, user_id: str) -> FreelanceProjectResponse:
        try:
            insert_data = data.model_dump(mode="json")
            insert_data["user_id"] = user_id
            result = self.supabase.table("freelance_projects").insert(insert_data).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create project")
            return FreelanceProjectResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error creating freelance project")

    def list_projects(self, user_id: str, search: Optional[str] = None, status: str = "all") -> List[FreelanceProjectResponse]:
        try:
            rows = self._rows(user_id)
            if search:
                term = search.lower()
                rows = [
                    r for r in rows
                    if any(term in (r.get(f) or "").lower() for f in ("title", "client", "description"))
                ]
            if status != "all":
                rows = [r for r in rows if r.get("status") == status]
            return [FreelanceProjectResponse(**r) for r in rows]
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading freelance projects")

    def get_project(self, project_id: str, user_id: str) -> FreelanceProjectResponse:
        try:
            return FreelanceProjectResponse(**self._get_owned(project_id, user_id))
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading freelance project")

    def update_project(self, project_id: str, data: FreelanceProjectUpdate, user_id: str) -> FreelanceProjectResponse:
        try:
            row = self._get_owned(project_id, user_id)
            update_data = data.model_dump(mode="json", exclude_unset=True)
            if not update_data:
                return FreelanceProjectResponse(**row)
            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
            result = self.supabase.table("freelance_projects").update(update_data).eq("id", project_id).execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Project not found")
            return FreelanceProjectResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error updating freelance project")

    def delete_project(self, project_id: str, user_id: str) -> bool:
        try:
            self._get_owned(project_id, user_id)
            self.supabase.table("freelance_projects").delete().eq("id", project_id).execute()
            return True
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error deleting freelance project")

    def get_stats(self, user_id: str) -> FreelanceStats:
        try:
            rows = self._rows(user_id)

            def count(status):
                return sum(1 for r in rows if r.get("status") == status)

            return FreelanceStats(
                total=len(rows),
                active=count("active"),
                pending=count("pending"),
                completed=count("completed"),
                on_hold=count("on-hold"),
                active_budget=float(sum(r.get("budget") or 0 for r in rows if r.get("status") == "active")),
                average_progress=round(sum(r.get("progress") or 0 for r in rows) / len(rows), 1) if rows else 0.0,
            )
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading freelance stats")
