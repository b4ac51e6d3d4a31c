import logging
from typing import Optional
from fastapi import HTTPException
from supabase import create_client, acreate_client, Client, AsyncClient
from app.config import settings

logger = logging.getLogger(__name__)

NOT_FOUND_CODE = "PGRST116"


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_publishable_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Used by the realtime fan-out."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client or cls.get_client()

    @classmethod
    async def create_async_client(cls) -> AsyncClient:
        """Realtime channels only exist on the async client."""
        key = settings.supabase_service_role_key or settings.supabase_publishable_key
        return await acreate_client(settings.supabase_url, key)

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def describe_missing_config() -> str:
    """Human readable reason the backend is not configured."""
    if not settings.supabase_url and not settings.supabase_publishable_key:
        return (
            "Environment variables are not configured. Please add SUPABASE_URL and "
            "SUPABASE_PUBLISHABLE_KEY to your .env file and restart the server."
        )
    if not settings.supabase_url:
        return "SUPABASE_URL is missing. Please add it to your .env file and restart the server."
    if not settings.supabase_publishable_key:
        return "SUPABASE_PUBLISHABLE_KEY is missing. Please add it to your .env file and restart the server."
    return "Environment variables are not properly configured."


def get_supabase() -> Client:
    if not settings.is_supabase_configured:
        raise HTTPException(status_code=503, detail=describe_missing_config())
    return SupabaseClient.get_client()


def connection_error(supabase: Client) -> Optional[Exception]:
    """
    Cheap query against profiles. Returns None when the backend answered
    (a not-found error still proves we reached it), otherwise the exception raised.
    """
    try:
        supabase.table("profiles").select("id").limit(1).execute()
        return None
    except Exception as e:
        if getattr(e, "code", None) == NOT_FOUND_CODE:
            return None
        return e


def check_connection(supabase: Client) -> bool:
    if not settings.is_supabase_configured:
        return False
    error = connection_error(supabase)
    if error is not None:
        logger.error("Supabase connection error: %s", error)
        return False
    return True
