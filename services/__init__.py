# services/__init__.py
from .errors import (
     ServiceError,
     Unauthorized,
     Forbidden,
     NotFound,
     BadRequest,
     InternalError,
)
from .access_control import Caller, authorize
from .pagination import paginate
from .reservation_service import ReservationService
from .unit_service import UnitService
from .catalog_service import RoomTypeService, FacilityService
from .building_service import TowerService, FloorService
from .user_service import UserService

__all__ = [
     "ServiceError",
     "Unauthorized",
     "Forbidden",
     "NotFound",
     "BadRequest",
     "InternalError",
     "Caller",
     "authorize",
     "paginate",
     "ReservationService",
     "UnitService",
     "RoomTypeService",
     "FacilityService",
     "TowerService",
     "FloorService",
     "UserService",
]
