"""
Core dependencies for route protection and ownership checks
"""

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.database.supabase_client import get_supabase
from app.modules.auth.service import AuthService
from supabase import Client
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)

# auto_error=False so anonymous callers reach the route and get a 401 with our own message
security = HTTPBearer(auto_error=False)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def require_user(detail: str = "Not authenticated"):
    """Dependency factory: resolve the bearer token or fail with 401 and the given message."""
    def dependency(
        credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
        auth_service: AuthService = Depends(get_auth_service),
    ) -> dict:
        if credentials is None or not credentials.credentials:
            raise HTTPException(status_code=401, detail=detail)
        return auth_service.get_current_user(credentials.credentials)
    return dependency


get_current_user_id = require_user()


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> Optional[dict]:
    """Current user, or None for anonymous callers and unusable tokens."""
    if credentials is None or not credentials.credentials:
        return None
    try:
        return auth_service.get_current_user(credentials.credentials)
    except HTTPException as e:
        if e.status_code == 401:
            logger.debug("Ignoring invalid bearer token on optional-auth route")
            return None
        raise


def ensure_owner(row: Dict[str, Any], user_id: str, detail: str, owner_field: str = "user_id") -> None:
    """Raise 403 unless the row belongs to user_id."""
    if row.get(owner_field) != user_id:
        raise HTTPException(status_code=403, detail=detail)
