"""
Media URL helpers: tell images from videos by extension and map public storage URLs back to object paths.
"""

from urllib.parse import urlparse, unquote
from typing import Optional

VIDEO_EXTENSIONS = (".mp4", ".mov", ".avi", ".webm")
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp", ".gif", ".svg")

PLACEHOLDER_IMAGE = "/placeholder.svg"
PUBLIC_OBJECT_PREFIX = "/storage/v1/object/public/"


def _path_of(url: str) -> str:
    return urlparse(url or "").path.lower()


def is_video_url(url: Optional[str]) -> bool:
    return _path_of(url).endswith(VIDEO_EXTENSIONS)


def is_image_url(url: Optional[str]) -> bool:
    return _path_of(url).endswith(IMAGE_EXTENSIONS)


def media_type_of(url: Optional[str]) -> str:
    """'videos' or 'images' (anything that isn't a known video extension counts as an image)."""
    return "videos" if is_video_url(url) else "images"


def file_extension(url: Optional[str], default: str = "jpg") -> str:
    path = urlparse(url or "").path
    name = path.rsplit("/", 1)[-1]
    if "." not in name:
        return default
    return name.rsplit(".", 1)[-1].lower() or default


def storage_path_from_public_url(url: str, bucket: str) -> Optional[str]:
    """
    Object path inside `bucket` for a Supabase public URL of the form
    https://<ref>.supabase.co/storage/v1/object/public/<bucket>/<path>.
    Returns None when the URL does not point into that bucket.
    """
    path = urlparse(url or "").path
    prefix = f"{PUBLIC_OBJECT_PREFIX}{bucket}/"
    if not path.startswith(prefix):
        return None
    object_path = unquote(path[len(prefix):])
    return object_path or None
