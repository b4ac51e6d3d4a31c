from pydantic import BaseModel
from typing import Optional, List, Dict, Any, Literal
from datetime import datetime


class NotificationResponse(BaseModel):
    id: str
    type: Literal["project_upload"] = "project_upload"
    project: Dict[str, Any]
    title: str
    message: str
    category_kind: str
    timestamp: datetime
    read: bool
    age: str


class InboxResponse(BaseModel):
    notifications: List[NotificationResponse]
    unread_count: int


class MarkReadResponse(BaseModel):
    updated: bool
    unread_count: int


class RealtimeStatus(BaseModel):
    enabled: bool
    subscribed: bool
    status: Optional[str] = None
