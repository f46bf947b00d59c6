# services/unit_service.py
"""
Unit Service - unit catalog operations.

Create and update run the unit row, its facility links and its images in one
transaction through the helpers in services.unit_composition.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from azure_blob import BlobStore, UploadedFile
from database import transaction
from models import Floor, RoomType, Unit, UnitFacility, UnitStatus
from schemas.unit import UnitCreate, UnitUpdate
from services.access_control import ADMIN_ONLY, ANY_ROLE, Caller, authorize
from services.errors import BadRequest, NotFound, with_error_handling
from services.pagination import paginate
from services.unit_composition import replace_facilities, replace_images

logger = logging.getLogger(__name__)


def _unit_query(db: Session):
     return db.query(Unit).options(
          selectinload(Unit.images),
          selectinload(Unit.facilities).selectinload(UnitFacility.facility),
          selectinload(Unit.room_type),
     )


def _require_floor(db: Session, floor_id: int) -> None:
     if db.get(Floor, floor_id) is None:
          raise BadRequest("Floor not found")


def _require_room_type(db: Session, room_type_id: int) -> None:
     if db.get(RoomType, room_type_id) is None:
          raise BadRequest("Room type not found")


def _require_editable_status(status: Optional[UnitStatus]) -> None:
     # reserved/booked are only reached through the reservation lifecycle
     if status is not None and UnitStatus(status) != UnitStatus.AVAILABLE:
          raise BadRequest("Unit status can only be set to available")


class UnitService:
     """Service class for unit-related business logic."""

     @staticmethod
     @with_error_handling
     def create_unit(
          db: Session,
          caller: Optional[Caller],
          data: UnitCreate,
          images: List[UploadedFile],
          blob_store: BlobStore,
     ) -> Unit:
          """
          Create a unit with its images and facilities.

          Raises:
               BadRequest: floor, room type or a facility does not exist,
                    or the status is not `available`
          """
          authorize(caller, ADMIN_ONLY)
          _require_editable_status(data.status)

          with transaction(db):
               _require_floor(db, data.floor_id)
               _require_room_type(db, data.room_type_id)

               unit = Unit(
                    floor_id=data.floor_id,
                    room_type_id=data.room_type_id,
                    price_offer=data.price_offer,
                    semi_gross_area=data.semi_gross_area,
                    unit_code=data.unit_code,
                    status=data.status,
               )
               db.add(unit)
               db.flush()

               # Facilities first: a bad facility ID fails before any blob is written
               replace_facilities(db, unit, data.facilities)
               replace_images(db, unit, images, blob_store)

          logger.info("Unit %s (%s) created", unit.id, unit.unit_code)
          return unit

     @staticmethod
     @with_error_handling
     def update_unit(
          db: Session,
          caller: Optional[Caller],
          unit_id: int,
          data: UnitUpdate,
          images: Optional[List[UploadedFile]],
          blob_store: BlobStore,
     ) -> Unit:
          """
          Update the provided fields of a unit.

          New images replace all current images; a non-empty facility list
          replaces all current facilities.
          """
          authorize(caller, ADMIN_ONLY)
          _require_editable_status(data.status)

          with transaction(db):
               unit = _unit_query(db).filter(Unit.id == unit_id).first()
               if unit is None:
                    raise NotFound("Unit not found")

               changes = data.model_dump(exclude_none=True, exclude={"facilities"})
               if "floor_id" in changes:
                    _require_floor(db, changes["floor_id"])
               if "room_type_id" in changes:
                    _require_room_type(db, changes["room_type_id"])

               for field, value in changes.items():
                    setattr(unit, field, value)
               db.flush()

               replace_facilities(db, unit, data.facilities)
               replace_images(db, unit, images, blob_store)

          logger.info("Unit %s updated", unit.id)
          return unit

     @staticmethod
     @with_error_handling
     def delete_unit(db: Session, caller: Optional[Caller], unit_id: int, blob_store: BlobStore) -> Unit:
          """Delete a unit, its rows and its image blobs."""
          authorize(caller, ADMIN_ONLY)

          with transaction(db):
               unit = _unit_query(db).filter(Unit.id == unit_id).first()
               if unit is None:
                    raise NotFound("Unit not found")

               for image in unit.images:
                    if image.image_url:
                         blob_store.discard(image.image_url)
               db.delete(unit)

          logger.info("Unit %s deleted", unit_id)
          return unit

     @staticmethod
     @with_error_handling
     def list_units(
          db: Session,
          caller: Optional[Caller],
          unit_code: Optional[str] = None,
          room_type_id: Optional[int] = None,
          facility_id: Optional[int] = None,
          page: Optional[int] = None,
          limit: Optional[int] = None,
     ) -> dict:
          """
          List units, newest first.

          Filters:
               unit_code: substring match on the unit code
               room_type_id: exact room type
               facility_id: units that have this facility
          """
          authorize(caller, ANY_ROLE)
          query = _unit_query(db)

          if unit_code:
               query = query.filter(Unit.unit_code.contains(unit_code))
          if room_type_id:
               query = query.filter(Unit.room_type_id == room_type_id)
          if facility_id:
               query = query.filter(Unit.facilities.any(UnitFacility.facility_id == facility_id))

          query = query.order_by(Unit.created_at.desc(), Unit.id.desc())
          return paginate(query, page, limit)

     @staticmethod
     @with_error_handling
     def get_unit(db: Session, caller: Optional[Caller], unit_id: int) -> Unit:
          authorize(caller, ANY_ROLE)
          unit = _unit_query(db).filter(Unit.id == unit_id).first()
          if unit is None:
               raise NotFound("Unit not found")
          return unit
