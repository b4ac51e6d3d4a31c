import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from supabase import Client
from app.modules.categories.service import category_kind
from app.modules.notifications import hub
from app.modules.notifications.schemas import InboxResponse, NotificationResponse, MarkReadResponse
import logging

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "New Project Uploaded!"


def format_age(timestamp: datetime, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    seconds = int((now - timestamp).total_seconds())
    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"


def build_notification(project: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """Notification document for a newly uploaded project (with embedded profiles/categories)."""
    profile = project.get("profiles") or {}
    category = project.get("categories") or {}
    username = profile.get("username") or "Someone"
    return {
        "id": f"notification_{uuid.uuid4().hex}",
        "type": "project_upload",
        "project": project,
        "title": NOTIFICATION_TITLE,
        "message": f'{username} uploaded "{project.get("title")}"',
        "category_kind": category_kind(category.get("name")),
        "timestamp": now or datetime.now(timezone.utc),
        "read": False,
    }


def _inserted_record(payload: Dict[str, Any]) -> Dict[str, Any]:
    """The new row from a postgres_changes payload."""
    data = payload.get("data") or {}
    return data.get("record") or payload.get("new") or payload.get("record") or {}


def handle_project_insert(payload: Dict[str, Any], supabase: Client) -> int:
    """Fetch the inserted project with its profile and category, then fan out. Returns recipients."""
    record = _inserted_record(payload)
    project_id = record.get("id")
    if not project_id:
        logger.warning("Ignoring project insert without id: %s", payload)
        return 0
    try:
        result = supabase.table("projects")\
            .select("*, profiles(*), categories(*)")\
            .eq("id", project_id)\
            .maybe_single()\
            .execute()
    except Exception as e:
        logger.warning(f"Error fetching project data for notification {project_id}: {e}")
        return 0
    if not result or not result.data:
        logger.warning(f"Project {project_id} not found for notification")
        return 0
    project = result.data
    return hub.fan_out(build_notification(project), exclude_user_id=project.get("user_id"))


class NotificationService:
    def get_inbox(self, user_id: str) -> InboxResponse:
        """Registers the inbox on first read so the user starts receiving notifications."""
        hub.register(user_id)
        items, unread = hub.list_inbox(user_id)
        now = datetime.now(timezone.utc)
        return InboxResponse(
            notifications=[NotificationResponse(**n, age=format_age(n["timestamp"], now)) for n in items],
            unread_count=unread,
        )

    def mark_read(self, user_id: str, notification_id: str) -> MarkReadResponse:
        updated = hub.mark_read(user_id, notification_id)
        return MarkReadResponse(updated=updated, unread_count=hub.list_inbox(user_id)[1])

    def mark_all_read(self, user_id: str) -> MarkReadResponse:
        updated = hub.mark_all_read(user_id) > 0
        return MarkReadResponse(updated=updated, unread_count=0)

    def clear(self, user_id: str) -> None:
        hub.clear(user_id)
