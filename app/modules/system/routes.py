from fastapi import APIRouter, Depends
from app.modules.system.schemas import BackendStatusResponse
from app.modules.system.service import SystemService

router = APIRouter(prefix="/system", tags=["system"])


def get_system_service() -> SystemService:
    return SystemService()


@router.get("/backend-status", response_model=BackendStatusResponse)
async def backend_status(service: SystemService = Depends(get_system_service)):
    """Configuration and connectivity of the Supabase backend (works while disconnected)."""
    return service.get_backend_status()
