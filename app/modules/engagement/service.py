from supabase import Client
from app.core.errors import backend_http_error
from app.modules.engagement.schemas import LikeStatus, SaveStatus, CommentResponse
from app.modules.projects.schemas import ProjectResponse
from typing import List, Dict, Any
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class EngagementService:
    """Likes, saves and comments. Like/save writes are idempotent; counts are read back exactly."""

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _get_project(self, project_id: str) -> Dict[str, Any]:
        result = self.supabase.table("projects")\
            .select("id, user_id")\
            .eq("id", project_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Project not found")
        return result.data

    def _exists(self, table: str, user_id: str, project_id: str) -> bool:
        result = self.supabase.table(table)\
            .select("id")\
            .eq("user_id", user_id)\
            .eq("project_id", project_id)\
            .execute()
        return bool(result.data)

    def _count(self, table: str, project_id: str) -> int:
        result = self.supabase.table(table)\
            .select("id", count="exact")\
            .eq("project_id", project_id)\
            .execute()
        return result.count or 0

    def _set_flag(self, table: str, user_id: str, project_id: str, on: bool) -> int:
        """Insert or delete the (user, project) row so that its presence equals `on`; return the new count."""
        self._get_project(project_id)
        exists = self._exists(table, user_id, project_id)
        if on and not exists:
            try:
                self.supabase.table(table).insert({"user_id": user_id, "project_id": project_id}).execute()
            except Exception as e:
                # A concurrent request inserted the same pair first
                if getattr(e, "code", None) != "23505":
                    raise
        elif not on and exists:
            self.supabase.table(table)\
                .delete()\
                .eq("user_id", user_id)\
                .eq("project_id", project_id)\
                .execute()
        return self._count(table, project_id)

    def set_like(self, project_id: str, user_id: str, liked: bool) -> LikeStatus:
        try:
            count = self._set_flag("likes", user_id, project_id, liked)
            return LikeStatus(project_id=project_id, liked=liked, likes_count=count)
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error toggling like")

    def set_save(self, project_id: str, user_id: str, saved: bool) -> SaveStatus:
        try:
            count = self._set_flag("saves", user_id, project_id, saved)
            return SaveStatus(project_id=project_id, saved=saved, saves_count=count)
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error toggling save")

    def list_saved_projects(self, user_id: str) -> List[ProjectResponse]:
        """Projects the user saved, most recently saved first."""
        try:
            result = self.supabase.table("saves")\
                .select("created_at, projects(*, profiles(*), categories(*))")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            projects = []
            for row in result.data or []:
                project = row.get("projects")
                if project:
                    projects.append(ProjectResponse(**project, is_saved=True))
            if projects:
                liked = self.supabase.table("likes")\
                    .select("project_id")\
                    .eq("user_id", user_id)\
                    .in_("project_id", [p.id for p in projects])\
                    .execute()
                liked_ids = {r["project_id"] for r in (liked.data or [])}
                for p in projects:
                    p.is_liked = p.id in liked_ids
            return projects
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading saved projects")

    def list_comments(self, project_id: str) -> List[CommentResponse]:
        try:
            self._get_project(project_id)
            result = self.supabase.table("comments")\
                .select("*, profiles(*)")\
                .eq("project_id", project_id)\
                .order("created_at")\
                .execute()
            return [CommentResponse(**c) for c in (result.data or [])]
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading comments")

    def add_comment(self, project_id: str, user_id: str, content: str) -> CommentResponse:
        try:
            self._get_project(project_id)
            result = self.supabase.table("comments").insert({
                "project_id": project_id,
                "user_id": user_id,
                "content": content,
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to add comment")
            return CommentResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error adding comment")

    def delete_comment(self, project_id: str, comment_id: str, user_id: str) -> bool:
        """The comment's author or the project's owner may delete it."""
        try:
            project = self._get_project(project_id)
            result = self.supabase.table("comments")\
                .select("*")\
                .eq("id", comment_id)\
                .eq("project_id", project_id)\
                .maybe_single()\
                .execute()
            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Comment not found")
            if user_id not in (result.data["user_id"], project["user_id"]):
                raise HTTPException(status_code=403, detail="You can only delete your own comments")
            self.supabase.table("comments").delete().eq("id", comment_id).execute()
            return True
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error deleting comment")
