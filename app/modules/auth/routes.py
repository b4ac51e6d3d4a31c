from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user_id
from app.modules.auth.schemas import CurrentUserResponse
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(current_user: Dict = Depends(get_current_user_id)):
    """Get the user behind the bearer token. Sign-in itself happens against Supabase Auth directly."""
    return current_user
