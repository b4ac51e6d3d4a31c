from supabase import Client
from app.core.errors import backend_http_error, is_missing_column_error
from app.modules.profiles.schemas import (
    ProfileResponse, ProfileWithProjects, ProfileSummary, ProfileUpdate, BannerUpdateResponse,
)
from app.modules.projects.schemas import ProjectResponse
from typing import Dict, Any
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

# Written only when the form sends a non-empty value
OPTIONAL_PROFILE_FIELDS = ("banner_url", "website", "location", "twitter", "instagram", "linkedin")


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _get_profile_row(self, column: str, value: str) -> Dict[str, Any]:
        result = self.supabase.table("profiles")\
            .select("*")\
            .eq(column, value)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Profile not found")
        return result.data

    def get_profile(self, user_id: str) -> ProfileResponse:
        try:
            return ProfileResponse(**self._get_profile_row("id", user_id))
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading profile")

    def get_profile_by_username(self, username: str) -> ProfileWithProjects:
        """Public profile page: the profile plus its projects, newest first."""
        try:
            profile = self._get_profile_row("username", username)
            projects = self.supabase.table("projects")\
                .select("*, categories(*)")\
                .eq("user_id", profile["id"])\
                .order("created_at", desc=True)\
                .execute()
            return ProfileWithProjects(
                profile=ProfileResponse(**profile),
                projects=[ProjectResponse(**p) for p in (projects.data or [])],
            )
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading profile")

    def get_summary(self, user_id: str) -> ProfileSummary:
        try:
            profile = self._get_profile_row("id", user_id)
            projects = self.supabase.table("projects")\
                .select("likes_count, views_count")\
                .eq("user_id", user_id)\
                .execute()
            rows = projects.data or []
            return ProfileSummary(
                profile=ProfileResponse(**profile),
                project_count=len(rows),
                total_likes=sum(r.get("likes_count") or 0 for r in rows),
                total_views=sum(r.get("views_count") or 0 for r in rows),
            )
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading profile summary")

    def _username_taken(self, username: str, user_id: str) -> bool:
        try:
            result = self.supabase.table("profiles")\
                .select("id")\
                .eq("username", username)\
                .neq("id", user_id)\
                .execute()
            return bool(result.data)
        except Exception as e:
            # The update itself still fails on the unique constraint if the name is taken
            logger.warning(f"Error checking username availability: {e}")
            return False

    def update_profile(self, user_id: str, data: ProfileUpdate) -> ProfileResponse:
        try:
            current = self._get_profile_row("id", user_id)
            if data.username != current.get("username") and self._username_taken(data.username, user_id):
                raise HTTPException(
                    status_code=409,
                    detail="Username Taken: This username is already taken. Please choose another.",
                )

            update_data: Dict[str, Any] = {
                "username": data.username,
                "full_name": data.full_name,
                "bio": data.bio,
                "avatar_url": data.avatar_url,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }
            for field in OPTIONAL_PROFILE_FIELDS:
                value = getattr(data, field)
                if value:
                    update_data[field] = value

            result = self.supabase.table("profiles").update(update_data).eq("id", user_id).execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")
            return ProfileResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error updating profile")

    def set_avatar(self, user_id: str, url: str) -> ProfileResponse:
        try:
            result = self.supabase.table("profiles").update({
                "avatar_url": url,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }).eq("id", user_id).execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")
            return ProfileResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error updating avatar")

    def set_banner(self, user_id: str, url: str) -> BannerUpdateResponse:
        """Best-effort: databases without the banner_url column report persisted=False."""
        try:
            result = self.supabase.table("profiles").update({"banner_url": url}).eq("id", user_id).execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")
            return BannerUpdateResponse(
                banner_url=url, persisted=True, message="Banner image updated successfully!",
            )
        except HTTPException:
            raise
        except Exception as e:
            if is_missing_column_error(e):
                logger.warning(f"banner_url column unavailable, banner not persisted: {e}")
                return BannerUpdateResponse(
                    banner_url=url,
                    persisted=False,
                    message="Banner image updated successfully! (Note: Banner will reset on page refresh until database is updated)",
                )
            raise backend_http_error(e, "Error updating banner")
