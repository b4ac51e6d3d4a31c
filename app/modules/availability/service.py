from supabase import Client
from app.config.availability_options import TOGGLEABLE_FIELDS
from app.core.errors import backend_http_error
from app.modules.availability import cache
from app.modules.availability.schemas import (
    AvailabilitySettings, AvailabilityResponse, AvailabilitySaveResponse,
)
from typing import Dict, Any
from fastapi import HTTPException
from datetime import datetime, timezone
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
import logging

logger = logging.getLogger(__name__)

SYNCED_MESSAGE = "Your availability settings have been saved successfully!"
LOCAL_ONLY_MESSAGE = "Your availability settings have been saved! (Stored locally - database will be updated soon)"


class AvailabilityService:
    """
    Availability settings: the cache holds the full document, the profile row holds
    bio/location/is_available. Loading layers defaults, then cache, then non-empty profile values.
    """

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _load_profile(self, user_id: str) -> Dict[str, Any]:
        result = self.supabase.table("profiles")\
            .select("*")\
            .eq("id", user_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="User not found. Please try again.")
        return result.data

    def get_settings(self, user_id: str) -> AvailabilityResponse:
        try:
            profile = self._load_profile(user_id)
            document = AvailabilitySettings().model_dump()
            saved_at = None
            cached = cache.get(user_id)
            if cached:
                saved_at = cached.pop("saved_at", None)
                document.update(cached)
            if profile.get("bio"):
                document["bio"] = profile["bio"]
            if profile.get("location"):
                document["location"] = profile["location"]
            return AvailabilityResponse(**document, saved_at=saved_at)
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Failed to load user data")

    def _sync_profile(self, user_id: str, settings: AvailabilitySettings) -> bool:
        """Best-effort profile update; failures leave the cached copy as the source of truth."""
        try:
            self.supabase.table("profiles").update({
                "bio": settings.bio or None,
                "location": settings.location or None,
                "is_available": settings.is_available,
            }).eq("id", user_id).execute()
            return True
        except Exception as e:
            logger.warning(f"Database update failed (settings kept in cache) for user {user_id}: {e}")
            return False

    def save_settings(self, user_id: str, settings: AvailabilitySettings) -> AvailabilitySaveResponse:
        saved_at = datetime.now(timezone.utc)
        cache.put(user_id, {**settings.model_dump(), "saved_at": saved_at})
        synced = self._sync_profile(user_id, settings)
        return AvailabilitySaveResponse(
            settings=AvailabilityResponse(**settings.model_dump(), saved_at=saved_at),
            synced=synced,
            message=SYNCED_MESSAGE if synced else LOCAL_ONLY_MESSAGE,
        )

    def update_settings(self, user_id: str, changes: Dict[str, Any]) -> AvailabilitySaveResponse:
        """Merge a partial document into the current settings and save."""
        current = self.get_settings(user_id).model_dump(exclude={"saved_at"})
        current.update(changes)
        try:
            merged = AvailabilitySettings(**current)
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False, include_context=False))
        return self.save_settings(user_id, merged)

    def toggle_value(self, user_id: str, field: str, value: str) -> AvailabilitySaveResponse:
        """Add value to a list field if absent, remove it if present."""
        if value not in TOGGLEABLE_FIELDS[field]:
            raise HTTPException(status_code=400, detail=f"Unknown {field} option: {value}")
        values = list(getattr(self.get_settings(user_id), field))
        if value in values:
            values.remove(value)
        else:
            values.append(value)
        return self.update_settings(user_id, {field: values})
