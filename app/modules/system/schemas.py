from pydantic import BaseModel
from typing import Optional


class EnvValueStatus(BaseModel):
    exists: bool
    value: Optional[str] = None
    is_valid: bool


class EnvStatus(BaseModel):
    url: EnvValueStatus
    key: EnvValueStatus


class BackendStatusResponse(BaseModel):
    configured: bool
    connected: bool
    message: Optional[str] = None
    env: EnvStatus
