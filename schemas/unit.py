# schemas/unit.py
"""
Pydantic schemas for units.

Create/update arrive as multipart form data (because of the images); the
router converts the form fields into these models before calling the service.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from models.unit import UnitStatus
from schemas.common import CamelModel


class UnitCreate(CamelModel):
     """Schema for creating a unit."""
     floor_id: int = Field(..., gt=0)
     room_type_id: int = Field(..., gt=0)
     status: UnitStatus = UnitStatus.AVAILABLE
     price_offer: Decimal = Field(..., ge=0, max_digits=14, decimal_places=2)
     semi_gross_area: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
     unit_code: str = Field(..., min_length=1, max_length=50)
     facilities: List[int] = Field(default_factory=list)


class UnitUpdate(CamelModel):
     """Schema for updating a unit; only provided fields change."""
     floor_id: Optional[int] = Field(None, gt=0)
     room_type_id: Optional[int] = Field(None, gt=0)
     status: Optional[UnitStatus] = None
     price_offer: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
     semi_gross_area: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
     unit_code: Optional[str] = Field(None, min_length=1, max_length=50)
     facilities: Optional[List[int]] = None


class UnitImageResponse(CamelModel):
     id: int
     image_url: str
     description: str = ""


class UnitResponse(CamelModel):
     """Unit with its images, facility names and room type name."""
     id: int
     unit_code: str
     floor_id: int
     room_type_id: int
     price_offer: Decimal
     semi_gross_area: Decimal
     status: UnitStatus
     images: List[UnitImageResponse] = Field(default_factory=list)
     facilities: List[str] = Field(default_factory=list)
     room_type_name: Optional[str] = None
     created_at: Optional[datetime] = None
