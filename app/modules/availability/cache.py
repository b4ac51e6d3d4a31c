"""Thread-safe per-user cache of availability settings documents (last write wins)."""
import threading
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)
_lock = threading.Lock()
_settings: dict[str, Dict[str, Any]] = {}


def put(user_id: str, document: Dict[str, Any]) -> None:
    with _lock:
        _settings[user_id] = dict(document)
        logger.debug(f"Cached availability settings for user {user_id}")


def get(user_id: str) -> Optional[Dict[str, Any]]:
    with _lock:
        document = _settings.get(user_id)
        return dict(document) if document is not None else None


def reset() -> None:
    with _lock:
        _settings.clear()
