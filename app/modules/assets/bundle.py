"""In-memory ZIP bundles for project assets."""
import io
import re
import zipfile
from typing import Iterable, Optional, Tuple

NO_DESCRIPTION = "No description provided"
VIDEO_NOTE = "Note: Video is included in its original format."


def description_text(description: Optional[str], is_video: bool) -> str:
    text = description or NO_DESCRIPTION
    if is_video:
        text = f"{text}\n\n{VIDEO_NOTE}"
    return text


def safe_name(title: str) -> str:
    """Title with every non-alphanumeric character replaced by underscore."""
    return re.sub(r"[^a-zA-Z0-9]", "_", title or "") or "project"


def _write_entry(zip_ref: zipfile.ZipFile, prefix: str, title: str, description: Optional[str],
                 media: bytes, extension: str, is_video: bool) -> None:
    zip_ref.writestr(f"{prefix}project.{extension}", media)
    zip_ref.writestr(f"{prefix}title.txt", title)
    zip_ref.writestr(f"{prefix}description.txt", description_text(description, is_video))


def build_project_zip(title: str, description: Optional[str], media: bytes, extension: str, is_video: bool) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zip_ref:
        _write_entry(zip_ref, "", title, description, media, extension, is_video)
    return buffer.getvalue()


def build_collection_zip(entries: Iterable[Tuple[str, Optional[str], bytes, str, bool]]) -> bytes:
    """One folder per project: <safe title>/project.<ext>, title.txt, description.txt."""
    buffer = io.BytesIO()
    used = set()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zip_ref:
        for title, description, media, extension, is_video in entries:
            folder = safe_name(title)
            candidate, n = folder, 2
            while candidate in used:
                candidate = f"{folder}_{n}"
                n += 1
            used.add(candidate)
            _write_entry(zip_ref, f"{candidate}/", title, description, media, extension, is_video)
    return buffer.getvalue()
