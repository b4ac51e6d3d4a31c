from app.config import settings
from app.core.errors import is_network_error
from app.database.supabase_client import SupabaseClient, connection_error, describe_missing_config
from app.modules.system.schemas import BackendStatusResponse
import logging

logger = logging.getLogger(__name__)

CONNECTION_CHECKLIST = (
    "Unable to connect to Supabase. Please verify:\n"
    "1. Your Supabase project is active\n"
    "2. Your credentials are correct\n"
    "3. Your network connection is working\n"
    "4. Check the server logs for detailed error messages"
)
NETWORK_UNREACHABLE = (
    "Network error: Unable to reach Supabase servers. Please check your internet connection "
    "and verify your Supabase URL is correct."
)
UNKNOWN_CHECK_ERROR = "Unknown error occurred while checking backend connection."


class SystemService:
    """Reports whether the backend is configured and reachable. Never raises."""

    def get_backend_status(self) -> BackendStatusResponse:
        env = settings.get_env_status()
        if not settings.is_supabase_configured:
            return BackendStatusResponse(
                configured=False, connected=False, message=describe_missing_config(), env=env
            )

        try:
            error = connection_error(SupabaseClient.get_client())
        except Exception as client_error:
            # create_client rejects malformed URLs/keys before any request is made
            error = client_error

        if error is None:
            connected, message = True, None
        elif is_network_error(error):
            logger.error("Backend check network error: %s", error)
            connected, message = False, NETWORK_UNREACHABLE
        elif getattr(error, "code", None):
            logger.error("Backend check error: %s", error)
            connected, message = False, CONNECTION_CHECKLIST
        else:
            logger.error("Backend check failed: %s", error)
            connected, message = False, UNKNOWN_CHECK_ERROR

        return BackendStatusResponse(configured=True, connected=connected, message=message, env=env)
