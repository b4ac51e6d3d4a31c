"""Thread-safe per-user store of recent search queries (most recent first)."""
import threading
import logging
from typing import List
from app.config import settings

logger = logging.getLogger(__name__)
_lock = threading.Lock()
_recent: dict[str, List[str]] = {}


def record(user_id: str, query: str) -> List[str]:
    """Move query to the front, drop duplicates, cap the list. Blank queries are ignored."""
    query = (query or "").strip()
    with _lock:
        current = _recent.get(user_id, [])
        if not query:
            return list(current)
        updated = [query] + [q for q in current if q != query]
        updated = updated[:settings.recent_searches_max]
        _recent[user_id] = updated
        logger.debug(f"Recorded search for user {user_id}")
        return list(updated)


def list_recent(user_id: str) -> List[str]:
    with _lock:
        return list(_recent.get(user_id, []))


def clear(user_id: str) -> None:
    with _lock:
        _recent.pop(user_id, None)


def reset() -> None:
    """Drop every user's history."""
    with _lock:
        _recent.clear()
