# routers/catalog.py
"""
CRUD routes for the name-only catalog entities: towers, room types and facilities.

All three share the same request and response shapes, so one builder creates
a router per service. Reads are open to every role; writes are admin-only.
"""
from typing import Optional, Type

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from azure_blob import BlobStore
from database import get_session
from dependencies import get_blob_store, require_caller
from schemas.catalog import CatalogItemCreate, CatalogItemResponse, CatalogItemUpdate
from schemas.common import Page, build_page
from services.access_control import Caller
from services.building_service import TowerService
from services.catalog_service import FacilityService, NamedEntityService, RoomTypeService


def build_catalog_router(service: Type[NamedEntityService], prefix: str, tag: str) -> APIRouter:
     router = APIRouter(prefix=prefix, tags=[tag])
     label = service.label.lower()

     @router.post("", response_model=CatalogItemResponse, status_code=status.HTTP_201_CREATED, summary=f"Create a {label}")
     def create_item(
          body: CatalogItemCreate,
          db: Session = Depends(get_session),
          caller: Caller = Depends(require_caller),
     ):
          return service.create(db, caller, body)

     @router.get("", response_model=Page[CatalogItemResponse], summary=f"List {label} records")
     def list_items(
          page: Optional[int] = Query(None, ge=1),
          limit: Optional[int] = Query(None, ge=1),
          db: Session = Depends(get_session),
          caller: Caller = Depends(require_caller),
     ):
          return build_page(service.list(db, caller, page, limit), CatalogItemResponse.model_validate)

     @router.get("/{item_id}", response_model=CatalogItemResponse, summary=f"Get {label} by ID")
     def get_item(
          item_id: int,
          db: Session = Depends(get_session),
          caller: Caller = Depends(require_caller),
     ):
          return service.get(db, caller, item_id)

     @router.put("/{item_id}", response_model=CatalogItemResponse, summary=f"Rename a {label}")
     def update_item(
          item_id: int,
          body: CatalogItemUpdate,
          db: Session = Depends(get_session),
          caller: Caller = Depends(require_caller),
     ):
          return service.update(db, caller, item_id, body)

     @router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, summary=f"Delete a {label}")
     def delete_item(
          item_id: int,
          db: Session = Depends(get_session),
          caller: Caller = Depends(require_caller),
          blob_store: BlobStore = Depends(get_blob_store),
     ):
          service.delete(db, caller, item_id, blob_store)
          return None

     return router


towers_router = build_catalog_router(TowerService, "/api/towers", "towers")
room_types_router = build_catalog_router(RoomTypeService, "/api/room-types", "room types")
facilities_router = build_catalog_router(FacilityService, "/api/facilities", "facilities")
