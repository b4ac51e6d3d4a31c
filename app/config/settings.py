from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List, Dict, Any


PLACEHOLDER_MARKER = "placeholder"


class Settings(BaseSettings):
    # Supabase (the two values that gate whether the backend is reachable)
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_url", "vite_supabase_url"),
    )
    supabase_publishable_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "supabase_publishable_key", "vite_supabase_publishable_key", "supabase_key"
        ),
    )
    supabase_service_role_key: Optional[str] = None  # Only needed to read rows hidden by RLS

    # Storage
    storage_bucket: str = "projects"
    max_image_bytes: int = 10 * 1024 * 1024
    max_video_bytes: int = 200 * 1024 * 1024
    asset_bundle_max_bytes: int = 2 * 1024 * 1024

    # Feed / search
    feed_page_size: int = 24
    feed_max_page_size: int = 100
    best_of_limit: int = 10
    suggestion_min_query_length: int = 2
    suggestion_project_limit: int = 5
    suggestion_user_limit: int = 3
    suggestion_category_limit: int = 3
    recent_searches_max: int = 5

    # Notifications
    notifications_max: int = 50
    notifications_realtime_enabled: bool = False

    # App
    app_name: str = "nexus-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://localhost:8080,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_supabase_configured(self) -> bool:
        """Both values set and neither is a placeholder left over from a template .env."""
        return bool(
            self.supabase_url
            and self.supabase_publishable_key
            and PLACEHOLDER_MARKER not in self.supabase_url
            and PLACEHOLDER_MARKER not in self.supabase_publishable_key
        )

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def get_env_status(self) -> Dict[str, Any]:
        """Masked view of the backend variables, safe to return to clients."""
        url = self.supabase_url
        key = self.supabase_publishable_key
        return {
            "url": {
                "exists": bool(url),
                "value": f"{url[:30]}..." if url else None,
                "is_valid": bool(url) and url.startswith("https://") and ".supabase.co" in url,
            },
            "key": {
                "exists": bool(key),
                "value": f"{key[:30]}..." if key else None,
                "is_valid": len(key) > 20,
            },
        }

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
