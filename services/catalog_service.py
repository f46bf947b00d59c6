# services/catalog_service.py
"""
Catalog Service - CRUD for the name-only entities (towers, room types, facilities).

Reads are open to every authenticated user; writes are admin-only.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from azure_blob import BlobStore
from database import transaction
from models import Facility, RoomType, Unit, UnitFacility
from schemas.catalog import CatalogItemCreate, CatalogItemUpdate
from services.access_control import ADMIN_ONLY, ANY_ROLE, Caller, authorize
from services.errors import BadRequest, NotFound, with_error_handling
from services.pagination import paginate

logger = logging.getLogger(__name__)


class NamedEntityService:
     """Shared CRUD for models whose only editable field is `name`."""

     model = None
     label = "Item"

     @classmethod
     def _get_or_404(cls, db: Session, item_id: int):
          item = db.get(cls.model, item_id)
          if item is None:
               raise NotFound(f"{cls.label} not found")
          return item

     @classmethod
     def _before_delete(cls, db: Session, item, blob_store: Optional[BlobStore]) -> None:
          """Hook for subclasses that own or guard related rows."""

     @classmethod
     @with_error_handling
     def list(cls, db: Session, caller: Optional[Caller], page: Optional[int] = None, limit: Optional[int] = None) -> dict:
          authorize(caller, ANY_ROLE)
          query = db.query(cls.model).order_by(cls.model.created_at.desc(), cls.model.id.desc())
          return paginate(query, page, limit)

     @classmethod
     @with_error_handling
     def get(cls, db: Session, caller: Optional[Caller], item_id: int):
          authorize(caller, ANY_ROLE)
          return cls._get_or_404(db, item_id)

     @classmethod
     @with_error_handling
     def create(cls, db: Session, caller: Optional[Caller], data: CatalogItemCreate):
          authorize(caller, ADMIN_ONLY)
          with transaction(db):
               item = cls.model(name=data.name)
               db.add(item)
               db.flush()
          logger.info("%s %s created", cls.label, item.id)
          return item

     @classmethod
     @with_error_handling
     def update(cls, db: Session, caller: Optional[Caller], item_id: int, data: CatalogItemUpdate):
          authorize(caller, ADMIN_ONLY)
          with transaction(db):
               item = cls._get_or_404(db, item_id)
               if data.name:
                    item.name = data.name
          return item

     @classmethod
     @with_error_handling
     def delete(cls, db: Session, caller: Optional[Caller], item_id: int, blob_store: BlobStore = None):
          authorize(caller, ADMIN_ONLY)
          with transaction(db):
               item = cls._get_or_404(db, item_id)
               cls._before_delete(db, item, blob_store)
               db.delete(item)
          logger.info("%s %s deleted", cls.label, item_id)
          return item


class RoomTypeService(NamedEntityService):
     model = RoomType
     label = "Room type"

     @classmethod
     def _before_delete(cls, db: Session, item, blob_store: Optional[BlobStore]) -> None:
          in_use = db.query(Unit.id).filter(Unit.room_type_id == item.id).count()
          if in_use:
               raise BadRequest("Room type is still assigned to units")


class FacilityService(NamedEntityService):
     model = Facility
     label = "Facility"

     @classmethod
     def _before_delete(cls, db: Session, item, blob_store: Optional[BlobStore]) -> None:
          db.query(UnitFacility).filter(UnitFacility.facility_id == item.id).delete(synchronize_session="fetch")
