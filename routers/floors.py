# routers/floors.py
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from azure_blob import BlobStore
from database import get_session
from dependencies import get_blob_store, require_caller
from models import Floor
from schemas.common import Page, build_page
from schemas.floor import FloorCreate, FloorResponse, FloorUpdate
from services.access_control import Caller
from services.building_service import FloorService
from utils.uploads import parse_form, read_optional_upload

router = APIRouter(prefix="/api/floors", tags=["floors"])


def _build_floor_response(floor: Floor) -> FloorResponse:
     response = FloorResponse.model_validate(floor)
     if floor.tower:
          response.tower_name = floor.tower.name
     return response


@router.post("", response_model=FloorResponse, status_code=status.HTTP_201_CREATED, summary="Create a floor")
def create_floor(
     tower_id: int = Form(..., alias="towerId"),
     label: str = Form(...),
     number: int = Form(...),
     floor_plan_image: Optional[UploadFile] = File(None, alias="floorPlanImage"),
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
     blob_store: BlobStore = Depends(get_blob_store),
):
     data = parse_form(FloorCreate, tower_id=tower_id, label=label, number=number)
     floor = FloorService.create_floor(db, caller, data, read_optional_upload(floor_plan_image), blob_store)
     return _build_floor_response(floor)


@router.put("/{floor_id}", response_model=FloorResponse, summary="Update a floor")
def update_floor(
     floor_id: int,
     tower_id: Optional[int] = Form(None, alias="towerId"),
     label: Optional[str] = Form(None),
     number: Optional[int] = Form(None),
     floor_plan_image: Optional[UploadFile] = File(None, alias="floorPlanImage"),
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
     blob_store: BlobStore = Depends(get_blob_store),
):
     """A new **floorPlanImage** replaces the stored one."""
     data = parse_form(FloorUpdate, tower_id=tower_id, label=label, number=number)
     floor = FloorService.update_floor(db, caller, floor_id, data, read_optional_upload(floor_plan_image), blob_store)
     return _build_floor_response(floor)


@router.get("", response_model=Page[FloorResponse], summary="List floors")
def list_floors(
     page: Optional[int] = Query(None, ge=1),
     limit: Optional[int] = Query(None, ge=1),
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     return build_page(FloorService.list_floors(db, caller, page, limit), _build_floor_response)


@router.get("/{floor_id}", response_model=FloorResponse, summary="Get floor by ID")
def get_floor(
     floor_id: int,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     return _build_floor_response(FloorService.get_floor(db, caller, floor_id))


@router.delete("/{floor_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a floor")
def delete_floor(
     floor_id: int,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
     blob_store: BlobStore = Depends(get_blob_store),
):
     """Deletes the floor, its units and their stored images."""
     FloorService.delete_floor(db, caller, floor_id, blob_store)
     return None
