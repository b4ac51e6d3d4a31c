from supabase import Client
from app.core.errors import backend_http_error
from app.modules.jobs.schemas import JobResponse, SavedJobToggle
from typing import List, Optional, Set
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class JobService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _saved_ids(self, user_id: Optional[str]) -> Set[str]:
        if not user_id:
            return set()
        result = self.supabase.table("saved_jobs").select("job_id").eq("user_id", user_id).execute()
        return {r["job_id"] for r in (result.data or [])}

    def list_jobs(
        self,
        search: Optional[str] = None,
        category: str = "all",
        location: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> List[JobResponse]:
        """Jobs newest first; search over title/company/description, exact category, location substring."""
        try:
            result = self.supabase.table("jobs").select("*").order("posted_at", desc=True).execute()
            rows = result.data or []
            if search:
                term = search.lower()
                rows = [
                    r for r in rows
                    if any(term in (r.get(f) or "").lower() for f in ("title", "company", "description"))
                ]
            if category and category != "all":
                rows = [r for r in rows if r.get("category") == category]
            if location and location != "all":
                term = location.lower()
                rows = [r for r in rows if term in (r.get("location") or "").lower()]
            saved = self._saved_ids(user_id)
            return [JobResponse(**r, is_saved=r["id"] in saved) for r in rows]
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading jobs")

    def toggle_saved(self, job_id: str, user_id: str) -> SavedJobToggle:
        try:
            job = self.supabase.table("jobs").select("id").eq("id", job_id).maybe_single().execute()
            if not job or not job.data:
                raise HTTPException(status_code=404, detail="Job not found")
            existing = self.supabase.table("saved_jobs")\
                .select("id")\
                .eq("user_id", user_id)\
                .eq("job_id", job_id)\
                .execute()
            if existing.data:
                self.supabase.table("saved_jobs").delete().eq("user_id", user_id).eq("job_id", job_id).execute()
                return SavedJobToggle(job_id=job_id, saved=False)
            self.supabase.table("saved_jobs").insert({"user_id": user_id, "job_id": job_id}).execute()
            return SavedJobToggle(job_id=job_id, saved=True)
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error saving job")

    def list_saved(self, user_id: str) -> List[JobResponse]:
        try:
            result = self.supabase.table("saved_jobs")\
                .select("created_at, jobs(*)")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            return [JobResponse(**r["jobs"], is_saved=True) for r in (result.data or []) if r.get("jobs")]
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading saved jobs")
