from pydantic import BaseModel
from typing import Optional, Dict, Any


class CurrentUserResponse(BaseModel):
    id: str
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = {}
    app_metadata: Dict[str, Any] = {}
    created_at: Optional[Any] = None
    updated_at: Optional[Any] = None
