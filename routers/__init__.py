# routers/__init__.py
from .catalog import facilities_router, room_types_router, towers_router
from .floors import router as floors_router
from .reservations import router as reservations_router
from .units import router as units_router
from .users import router as users_router

api_routers = [
     users_router,
     towers_router,
     floors_router,
     room_types_router,
     facilities_router,
     units_router,
     reservations_router,
]

__all__ = ["api_routers"]
