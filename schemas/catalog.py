# schemas/catalog.py
"""
Schemas shared by the name-only catalog entities: towers, room types and facilities.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from schemas.common import CamelModel


class CatalogItemCreate(CamelModel):
     name: str = Field(..., min_length=1, max_length=150)


class CatalogItemUpdate(CamelModel):
     name: Optional[str] = Field(None, min_length=1, max_length=150)


class CatalogItemResponse(CamelModel):
     id: int
     name: str
     created_at: Optional[datetime] = None
