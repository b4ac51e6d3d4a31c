from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user_id
from app.modules.notifications import listener
from app.modules.notifications.schemas import InboxResponse, MarkReadResponse, RealtimeStatus
from app.modules.notifications.service import NotificationService
from typing import Dict

router = APIRouter(prefix="/notifications", tags=["notifications"])


def get_notification_service() -> NotificationService:
    return NotificationService()


@router.get("", response_model=InboxResponse)
async def get_inbox(
    user: Dict = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
):
    return service.get_inbox(user["id"])


@router.post("/read-all", response_model=MarkReadResponse)
async def mark_all_read(
    user: Dict = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
):
    return service.mark_all_read(user["id"])


@router.post("/{notification_id}/read", response_model=MarkReadResponse)
async def mark_read(
    notification_id: str,
    user: Dict = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
):
    return service.mark_read(user["id"], notification_id)


@router.delete("", status_code=204)
async def clear_inbox(
    user: Dict = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
):
    service.clear(user["id"])


@router.get("/realtime-status", response_model=RealtimeStatus)
async def realtime_status():
    return listener.get_status()
