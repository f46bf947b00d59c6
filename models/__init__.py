# models/__init__.py
from .base import Base
from .user import User, UserRole
from .tower import Tower
from .floor import Floor
from .room_type import RoomType
from .facility import Facility
from .unit import Unit, UnitImage, UnitFacility, UnitStatus
from .customer import Customer
from .reservation import Reservation, ReservationStatus, PaymentType

__all__ = [
     "Base",
     "User",
     "UserRole",
     "Tower",
     "Floor",
     "RoomType",
     "Facility",
     "Unit",
     "UnitImage",
     "UnitFacility",
     "UnitStatus",
     "Customer",
     "Reservation",
     "ReservationStatus",
     "PaymentType",
]
