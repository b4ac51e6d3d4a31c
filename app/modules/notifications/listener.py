"""
Realtime subscription to project inserts. Runs on the async Supabase client and
hands each insert to handle_project_insert on a worker thread (the fetch uses the sync client).
"""
import asyncio
import logging
from typing import Optional
from app.config import settings
from app.database.supabase_client import SupabaseClient
from app.modules.notifications.service import handle_project_insert

logger = logging.getLogger(__name__)

_client = None
_channel = None
_status: Optional[str] = None


def get_status() -> dict:
    return {
        "enabled": settings.notifications_realtime_enabled,
        "subscribed": _status == "SUBSCRIBED",
        "status": _status,
    }


def _on_subscribe(status, err=None):
    global _status
    _status = getattr(status, "value", str(status))
    if err:
        logger.warning(f"Realtime subscription status {_status}: {err}")
    else:
        logger.info(f"Realtime subscription status: {_status}")


async def start_project_listener() -> bool:
    """Subscribe to INSERTs on public.projects. Returns False when disabled or not configured."""
    global _client, _channel
    if not settings.notifications_realtime_enabled:
        logger.info("Realtime notifications disabled")
        return False
    if not settings.is_supabase_configured:
        logger.warning("Supabase not configured, skipping realtime listener setup")
        return False

    loop = asyncio.get_running_loop()
    fetch_client = SupabaseClient.get_service_client()

    def on_insert(payload):
        logger.debug("New project detected: %s", payload)
        future = loop.run_in_executor(None, handle_project_insert, payload, fetch_client)
        future.add_done_callback(_log_failure)

    try:
        _client = await SupabaseClient.create_async_client()
        _channel = _client.channel("projects")
        _channel.on_postgres_changes(
            "INSERT", schema="public", table="projects", callback=on_insert
        )
        await _channel.subscribe(_on_subscribe)
        logger.info("Realtime listener for new projects started")
        return True
    except Exception as e:
        logger.warning(f"Failed to start realtime listener: {e}")
        _client = None
        _channel = None
        return False


def _log_failure(future):
    exc = future.exception()
    if exc is not None:
        logger.warning(f"Notification fan-out failed: {exc}")


async def stop_project_listener() -> None:
    global _client, _channel, _status
    if _client is None:
        return
    try:
        await _client.remove_all_channels()
    except Exception as e:
        logger.warning(f"Error closing realtime channels: {e}")
    _client = None
    _channel = None
    _status = None
