from supabase import Client
from app.config import settings
from app.core.errors import backend_http_error
from app.modules.assets import bundle
from app.modules.assets.schemas import AssetResponse
from app.modules.projects.media import (
    is_video_url, media_type_of, file_extension, storage_path_from_public_url,
)
from typing import List, Optional, Dict, Any, Tuple
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class AssetService:
    """The caller's projects as downloadable assets."""

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _rows(self, user_id: str) -> List[Dict[str, Any]]:
        result = self.supabase.table("projects")\
            .select("*, categories(*)")\
            .eq("user_id", user_id)\
            .order("created_at", desc=True)\
            .execute()
        return result.data or []

    @staticmethod
    def _to_asset(row: Dict[str, Any]) -> AssetResponse:
        return AssetResponse(
            id=row["id"],
            title=row.get("title") or "",
            description=row.get("description"),
            image_url=row.get("image_url"),
            media_type=media_type_of(row.get("image_url")),
            category_name=(row.get("categories") or {}).get("name"),
            created_at=row.get("created_at"),
        )

    def list_assets(self, user_id: str, media_type: str = "all", search: Optional[str] = None) -> List[AssetResponse]:
        try:
            assets = [self._to_asset(r) for r in self._rows(user_id)]
            if media_type != "all":
                assets = [a for a in assets if a.media_type == media_type]
            if search:
                term = search.lower()
                assets = [a for a in assets if term in a.title.lower()]
            return assets
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error loading assets")

    def _download_media(self, image_url: Optional[str]) -> bytes:
        path = storage_path_from_public_url(image_url, settings.storage_bucket) if image_url else None
        if not path:
            raise HTTPException(status_code=404, detail="Asset file not found in storage")
        return self.supabase.storage.from_(settings.storage_bucket).download(path)

    def _check_size(self, data: bytes) -> bytes:
        if len(data) > settings.asset_bundle_max_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"Zip file is too large ({round(len(data) / 1024)}kb). Maximum allowed is "
                       f"{round(settings.asset_bundle_max_bytes / 1024)}kb.",
            )
        return data

    def build_bundle(self, project_id: str, user_id: str) -> Tuple[str, bytes]:
        """(filename, zip bytes) for one of the caller's projects."""
        try:
            result = self.supabase.table("projects")\
                .select("*")\
                .eq("id", project_id)\
                .eq("user_id", user_id)\
                .maybe_single()\
                .execute()
            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Asset not found")
            row = result.data
            url = row.get("image_url")
            data = bundle.build_project_zip(
                title=row.get("title") or "",
                description=row.get("description"),
                media=self._download_media(url),
                extension=file_extension(url),
                is_video=is_video_url(url),
            )
            return f"{bundle.safe_name(row.get('title'))}_project.zip", self._check_size(data)
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error creating asset bundle")

    def build_collection(self, user_id: str) -> Tuple[str, bytes]:
        """All of the caller's assets in one ZIP; assets whose media cannot be fetched are skipped."""
        try:
            rows = self._rows(user_id)
            if not rows:
                raise HTTPException(status_code=404, detail="No assets to download")
            entries = []
            for row in rows:
                url = row.get("image_url")
                try:
                    media = self._download_media(url)
                except Exception as e:
                    logger.warning(f"Error processing asset {row.get('title')}: {e}")
                    continue
                entries.append((row.get("title") or "", row.get("description"), media, file_extension(url), is_video_url(url)))
            if not entries:
                raise HTTPException(status_code=404, detail="No asset files could be downloaded")
            return "nexus_assets.zip", self._check_size(bundle.build_collection_zip(entries))
        except HTTPException:
            raise
        except Exception as e:
            raise backend_http_error(e, "Error creating asset collection")
