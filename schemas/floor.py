# schemas/floor.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from schemas.common import CamelModel


class FloorCreate(CamelModel):
     tower_id: int = Field(..., gt=0)
     label: str = Field(..., min_length=1, max_length=100)
     number: int


class FloorUpdate(CamelModel):
     tower_id: Optional[int] = Field(None, gt=0)
     label: Optional[str] = Field(None, min_length=1, max_length=100)
     number: Optional[int] = None


class FloorResponse(CamelModel):
     id: int
     tower_id: int
     label: str
     number: int
     floor_plan_image_url: Optional[str] = None
     tower_name: Optional[str] = None
     created_at: Optional[datetime] = None
