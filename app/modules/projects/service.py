from supabase import Client
from app.config import settings
from app.core.dependencies import ensure_owner
from app.core.errors import backend_http_error
from app.modules.categories.service import is_video_category
from app.modules.projects import feed
from app.modules.projects.media import (
    is_video_url, is_image_url, storage_path_from_public_url, PLACEHOLDER_IMAGE,
)
from app.modules.projects.schemas import (
    FeedFilters, FeedResponse, ProjectCreate, ProjectUpdate, ProjectResponse,
)
from typing import List, Optional, Dict, Any, Set, Tuple
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


def check_media_size(size: Optional[int], is_video: bool) -> None:
    """Reject media above the upload limit (200MB for video, 10MB for images)."""
    limit = settings.max_video_bytes if is_video else settings.max_image_bytes
    if size is not None and size > limit:
        kind = "a video" if is_video else "an image"
        raise HTTPException(
            status_code=400,
            detail=f"File too large: please select {kind} smaller than {limit // (1024 * 1024)}MB.",
        )


class ProjectService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _viewer_flags(self, viewer_id: Optional[str], project_ids: List[str]) -> Tuple[Set[str], Set[str]]:
        """Project ids the viewer has liked and saved."""
        if not viewer_id or not project_ids:
            return set(), set()
        likes = self.supabase.table("likes")\
            .select("project_id")\
            .eq("user_id", viewer_id)\
            .in_("project_id", project_ids)\
            .execute()
        saves = self.supabase.table("saves")\
            .select("project_id")\
            .eq("user_id", viewer_id)\
            .in_("project_id", project_ids)\
            .execute()
        return (
            {r["project_id"] for r in (likes.data or [])},
            {r["project_id"] for r in (saves.data or [])},
        )

    def _annotate(self, rows: List[Dict[str, Any]], viewer_id: Optional[str]) -> List[ProjectResponse]:
        liked, saved = self._viewer_flags(viewer_id, [r["id"] for r in rows])
        return [
            ProjectResponse(**r, is_liked=r["id"] in liked, is_saved=r["id"] in saved)
            for r in rows
        ]

    def get_feed(self, filters: FeedFilters, viewer_id: Optional[str] = None) -> FeedResponse:
        """Run the feed pipeline: query-builder steps, then in-memory steps, then pagination."""
        try:
            query = self.supabase.table("projects").select(feed.FEED_SELECT)
            query = feed.apply_filters(query, filters)
            result = query.execute()

            rows = feed.run_in_memory_steps(result.data or [], filters, settings.best_of_limit)
            page = feed.paginate(rows, filters.offset, filters.limit)

            return FeedResponse(
                items=self._annotate(page, viewer_id),
                total=len(rows),
                limit=filters.limit,
                offset=filters.offset,
                query_params=feed.to_query_params(filters),
                active_filter_count=feed.active_filter_count(filters),
            )
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading projects")

    def _get_row(self, project_id: str, select: str = "*") -> Dict[str, Any]:
        result = self.supabase.table("projects")\
            .select(select)\
            .eq("id", project_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Project not found")
        return result.data

    def get_project(self, project_id: str, viewer_id: Optional[str] = None) -> ProjectResponse:
        try:
            row = self._get_row(project_id, feed.FEED_SELECT)
            return self._annotate([row], viewer_id)[0]
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading project")

    def get_owned_row(self, project_id: str, user_id: str, action: str) -> Dict[str, Any]:
        row = self._get_row(project_id)
        ensure_owner(row, user_id, f"You can only {action} your own projects")
        return row

    def _category_name(self, category_id: Optional[str]) -> Optional[str]:
        if not category_id:
            return None
        result = self.supabase.table("categories")\
            .select("name")\
            .eq("id", category_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=400, detail="Category does not exist")
        return result.data["name"]

    def create_project(self, data: ProjectCreate, user_id: str) -> ProjectResponse:
        """Insert a project for an already-uploaded media URL."""
        try:
            category_name = self._category_name(data.category_id)
            if is_video_url(data.media_url) and not is_video_category(category_name):
                raise HTTPException(
                    status_code=400,
                    detail="Videos can only be uploaded to the Edited Video or Motion categories",
                )
            check_media_size(data.file_size, is_video_url(data.media_url))

            result = self.supabase.table("projects").insert({
                "user_id": user_id,
                "title": data.title,
                "description": data.description,
                "category_id": data.category_id,
                "image_url": data.media_url,
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create project")
            return ProjectResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error creating project")

    def update_project(self, project_id: str, data: ProjectUpdate, user_id: str) -> ProjectResponse:
        try:
            row = self.get_owned_row(project_id, user_id, "edit")
            update_data = data.model_dump(exclude_unset=True)
            if not update_data:
                return ProjectResponse(**row)
            if "category_id" in update_data:
                category_name = self._category_name(update_data["category_id"])
                if is_video_url(row.get("image_url")) and not is_video_category(category_name):
                    raise HTTPException(
                        status_code=400,
                        detail="Video projects must stay in the Edited Video or Motion categories",
                    )
            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
            result = self.supabase.table("projects").update(update_data).eq("id", project_id).execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Project not found")
            return ProjectResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error updating project")

    def replace_image(self, project_id: str, media_url: str, user_id: str,
                      file_size: Optional[int] = None) -> ProjectResponse:
        try:
            self.get_owned_row(project_id, user_id, "edit")
            if not is_image_url(media_url):
                raise HTTPException(status_code=400, detail="Please select an image file")
            check_media_size(file_size, is_video=False)
            result = self.supabase.table("projects").update({
                "image_url": media_url,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }).eq("id", project_id).execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Project not found")
            return ProjectResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error replacing project image")

    def delete_image(self, project_id: str, user_id: str) -> ProjectResponse:
        """Remove the stored media object and point the project at the placeholder image."""
        try:
            row = self.get_owned_row(project_id, user_id, "edit")
            image_url = row.get("image_url")
            path = storage_path_from_public_url(image_url, settings.storage_bucket) if image_url else None
            if path:
                try:
                    self.supabase.storage.from_(settings.storage_bucket).remove([path])
                except Exception as e:
                    logger.error("Storage delete error for %s: %s", path, e)
                    raise HTTPException(status_code=500, detail="Failed to delete image from storage.")
            else:
                logger.warning("Project %s image is not in bucket %s; skipping storage delete", project_id, settings.storage_bucket)

            result = self.supabase.table("projects").update({
                "image_url": PLACEHOLDER_IMAGE,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }).eq("id", project_id).execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Project not found")
            return ProjectResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error deleting project image")

    def delete_project(self, project_id: str, user_id: str) -> bool:
        try:
            self.get_owned_row(project_id, user_id, "delete")
            self.supabase.table("projects").delete().eq("id", project_id).execute()
            return True
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error deleting project")

    def list_user_projects(self, user_id: str, viewer_id: Optional[str] = None) -> List[ProjectResponse]:
        """A user's projects, newest first, with their categories."""
        try:
            result = self.supabase.table("projects")\
                .select("*, categories(*)")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            return self._annotate(result.data or [], viewer_id)
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading user projects")
