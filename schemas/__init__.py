# schemas/__init__.py
from .common import Page, SuccessResponse
from .user import UserCreate, UserUpdate, UserResponse, LoginRequest, LoginResponse
from .catalog import CatalogItemCreate, CatalogItemUpdate, CatalogItemResponse
from .floor import FloorCreate, FloorUpdate, FloorResponse
from .unit import UnitCreate, UnitUpdate, UnitResponse, UnitImageResponse
from .reservation import (
     CustomerCreate,
     ReservationDetails,
     ReservationCreate,
     ReservationStatusUpdate,
     ReservationResponse,
)

__all__ = [
     "Page",
     "SuccessResponse",
     "UserCreate",
     "UserUpdate",
     "UserResponse",
     "LoginRequest",
     "LoginResponse",
     "CatalogItemCreate",
     "CatalogItemUpdate",
     "CatalogItemResponse",
     "FloorCreate",
     "FloorUpdate",
     "FloorResponse",
     "UnitCreate",
     "UnitUpdate",
     "UnitResponse",
     "UnitImageResponse",
     "CustomerCreate",
     "ReservationDetails",
     "ReservationCreate",
     "ReservationStatusUpdate",
     "ReservationResponse",
]
