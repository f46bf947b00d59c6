# services/building_service.py
"""
Building Service - towers and their floors.

Floors own an optional floor plan image stored in the blob store; the blob is
deleted when the floor (or its tower) is deleted or the image is replaced.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session, selectinload

from azure_blob import BlobStore, UploadedFile
from database import transaction
from models import Floor, Tower
from schemas.floor import FloorCreate, FloorUpdate
from services.access_control import ADMIN_ONLY, ANY_ROLE, Caller, authorize
from services.catalog_service import NamedEntityService
from services.errors import BadRequest, NotFound, with_error_handling
from services.pagination import paginate

logger = logging.getLogger(__name__)


class TowerService(NamedEntityService):
     model = Tower
     label = "Tower"

     @classmethod
     def _before_delete(cls, db: Session, item, blob_store: Optional[BlobStore]) -> None:
          # Floors and units go with the tower through ORM cascades; their blobs do not
          if blob_store is None:
               return
          for floor in item.floors:
               if floor.floor_plan_image_url:
                    blob_store.discard(floor.floor_plan_image_url)
               for unit in floor.units:
                    for image in unit.images:
                         blob_store.discard(image.image_url)


def _require_tower(db: Session, tower_id: int) -> None:
     if db.get(Tower, tower_id) is None:
          raise BadRequest("Tower not found")


class FloorService:
     """Service class for floors."""

     @staticmethod
     @with_error_handling
     def list_floors(db: Session, caller: Optional[Caller], page: Optional[int] = None, limit: Optional[int] = None) -> dict:
          authorize(caller, ANY_ROLE)
          query = (
               db.query(Floor)
               .options(selectinload(Floor.tower))
               .order_by(Floor.created_at.desc(), Floor.id.desc())
          )
          return paginate(query, page, limit)

     @staticmethod
     @with_error_handling
     def get_floor(db: Session, caller: Optional[Caller], floor_id: int) -> Floor:
          authorize(caller, ANY_ROLE)
          floor = db.query(Floor).options(selectinload(Floor.tower)).filter(Floor.id == floor_id).first()
          if floor is None:
               raise NotFound("Floor not found")
          return floor

     @staticmethod
     @with_error_handling
     def create_floor(
          db: Session,
          caller: Optional[Caller],
          data: FloorCreate,
          floor_plan: Optional[UploadedFile],
          blob_store: BlobStore,
     ) -> Floor:
          """
          Create a floor in an existing tower.

          Raises:
               BadRequest: the tower does not exist
          """
          authorize(caller, ADMIN_ONLY)

          with transaction(db):
               _require_tower(db, data.tower_id)

               floor_plan_image_url = None
               if floor_plan is not None:
                    floor_plan_image_url = blob_store.store(floor_plan.content, floor_plan.filename).reference

               floor = Floor(
                    tower_id=data.tower_id,
                    label=data.label,
                    number=data.number,
                    floor_plan_image_url=floor_plan_image_url,
               )
               db.add(floor)
               db.flush()

          logger.info("Floor %s created in tower %s", floor.id, floor.tower_id)
          return floor

     @staticmethod
     @with_error_handling
     def update_floor(
          db: Session,
          caller: Optional[Caller],
          floor_id: int,
          data: FloorUpdate,
          floor_plan: Optional[UploadedFile],
          blob_store: BlobStore,
     ) -> Floor:
          """Update the provided fields; a new floor plan replaces the old blob."""
          authorize(caller, ADMIN_ONLY)

          with transaction(db):
               floor = db.get(Floor, floor_id)
               if floor is None:
                    raise NotFound("Floor not found")

               changes = data.model_dump(exclude_none=True)
               if "tower_id" in changes:
                    _require_tower(db, changes["tower_id"])
               for field, value in changes.items():
                    setattr(floor, field, value)

               if floor_plan is not None:
                    stored = blob_store.store(floor_plan.content, floor_plan.filename)
                    if floor.floor_plan_image_url:
                         blob_store.discard(floor.floor_plan_image_url)
                    floor.floor_plan_image_url = stored.reference

          return floor

     @staticmethod
     @with_error_handling
     def delete_floor(db: Session, caller: Optional[Caller], floor_id: int, blob_store: BlobStore) -> Floor:
          authorize(caller, ADMIN_ONLY)

          with transaction(db):
               floor = db.get(Floor, floor_id)
               if floor is None:
                    raise NotFound("Floor not found")
               if floor.floor_plan_image_url:
                    blob_store.discard(floor.floor_plan_image_url)
               for unit in floor.units:
                    for image in unit.images:
                         blob_store.discard(image.image_url)
               db.delete(floor)

          logger.info("Floor %s deleted", floor_id)
          return floor
