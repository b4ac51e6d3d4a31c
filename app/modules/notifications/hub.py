"""
Thread-safe in-process notification inboxes, one per registered user (newest first).
The realtime listener fans new-project notifications out to every registered inbox.
"""
import threading
import logging
from typing import Any, Dict, List, Optional, Tuple
from app.config import settings

logger = logging.getLogger(__name__)
_lock = threading.Lock()
_inboxes: dict[str, List[Dict[str, Any]]] = {}


def register(user_id: str) -> None:
    with _lock:
        if user_id not in _inboxes:
            _inboxes[user_id] = []
            logger.debug(f"Registered notification inbox for user {user_id}")


def registered_users() -> List[str]:
    with _lock:
        return list(_inboxes)


def push(user_id: str, notification: Dict[str, Any]) -> None:
    with _lock:
        inbox = _inboxes.setdefault(user_id, [])
        inbox.insert(0, notification)
        del inbox[settings.notifications_max:]


def fan_out(notification: Dict[str, Any], exclude_user_id: Optional[str] = None) -> int:
    """Deliver a copy to every registered inbox except exclude_user_id. Returns recipients."""
    with _lock:
        recipients = [u for u in _inboxes if u != exclude_user_id]
        for user_id in recipients:
            inbox = _inboxes[user_id]
            inbox.insert(0, dict(notification))
            del inbox[settings.notifications_max:]
    return len(recipients)


def list_inbox(user_id: str) -> Tuple[List[Dict[str, Any]], int]:
    """(notifications, unread_count)"""
    with _lock:
        inbox = [dict(n) for n in _inboxes.get(user_id, [])]
    return inbox, sum(1 for n in inbox if not n["read"])


def mark_read(user_id: str, notification_id: str) -> bool:
    """True when an unread notification was flipped to read."""
    with _lock:
        for n in _inboxes.get(user_id, []):
            if n["id"] == notification_id:
                if n["read"]:
                    return False
                n["read"] = True
                return True
    return False


def mark_all_read(user_id: str) -> int:
    with _lock:
        unread = [n for n in _inboxes.get(user_id, []) if not n["read"]]
        for n in unread:
            n["read"] = True
    return len(unread)


def clear(user_id: str) -> None:
    with _lock:
        if user_id in _inboxes:
            _inboxes[user_id] = []


def reset() -> None:
    with _lock:
        _inboxes.clear()
