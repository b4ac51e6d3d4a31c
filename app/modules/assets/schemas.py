from pydantic import BaseModel
from typing import Optional, Literal
from datetime import datetime


class AssetResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    media_type: Literal["images", "videos"]
    category_name: Optional[str] = None
    created_at: Optional[datetime] = None
