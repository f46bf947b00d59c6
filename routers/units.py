# routers/units.py
"""
Unit API routes.

Create and update take multipart form data so images can be sent with the
unit fields. Facilities are sent as repeated `facilities` fields.
"""
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from azure_blob import BlobStore
from database import get_session
from dependencies import get_blob_store, require_caller
from models import Unit, UnitStatus
from schemas.common import Page, build_page
from schemas.unit import UnitCreate, UnitImageResponse, UnitResponse, UnitUpdate
from services.access_control import Caller
from services.unit_service import UnitService
from utils.uploads import parse_form, read_uploads

router = APIRouter(prefix="/api/units", tags=["units"])


def _build_unit_response(unit: Unit) -> UnitResponse:
     return UnitResponse(
          id=unit.id,
          unit_code=unit.unit_code,
          floor_id=unit.floor_id,
          room_type_id=unit.room_type_id,
          price_offer=unit.price_offer,
          semi_gross_area=unit.semi_gross_area,
          status=unit.status,
          images=[UnitImageResponse.model_validate(image) for image in unit.images],
          facilities=[link.facility.name for link in unit.facilities if link.facility],
          room_type_name=unit.room_type.name if unit.room_type else None,
          created_at=unit.created_at,
     )


@router.post(
     "",
     response_model=UnitResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a unit",
)
def create_unit(
     floor_id: int = Form(..., alias="floorId"),
     room_type_id: int = Form(..., alias="roomTypeId"),
     unit_code: str = Form(..., alias="unitCode"),
     price_offer: Decimal = Form(..., alias="priceOffer"),
     semi_gross_area: Decimal = Form(..., alias="semiGrossArea"),
     unit_status: Optional[UnitStatus] = Form(None, alias="status"),
     facilities: List[int] = Form([]),
     images: List[UploadFile] = File([]),
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
     blob_store: BlobStore = Depends(get_blob_store),
):
     """
     Create a unit with its facilities and images.

     - **status**: only **available** is accepted (the default)
     - **facilities**: facility IDs; every ID must exist
     - **images**: JPG, PNG or WEBP, 5MB each at most
     """
     data = parse_form(
          UnitCreate,
          floor_id=floor_id,
          room_type_id=room_type_id,
          unit_code=unit_code,
          price_offer=price_offer,
          semi_gross_area=semi_gross_area,
          status=unit_status,
          facilities=facilities,
     )
     unit = UnitService.create_unit(db, caller, data, read_uploads(images), blob_store)
     return _build_unit_response(unit)


@router.put(
     "/{unit_id}",
     response_model=UnitResponse,
     summary="Update a unit",
)
def update_unit(
     unit_id: int,
     floor_id: Optional[int] = Form(None, alias="floorId"),
     room_type_id: Optional[int] = Form(None, alias="roomTypeId"),
     unit_code: Optional[str] = Form(None, alias="unitCode"),
     price_offer: Optional[Decimal] = Form(None, alias="priceOffer"),
     semi_gross_area: Optional[Decimal] = Form(None, alias="semiGrossArea"),
     unit_status: Optional[UnitStatus] = Form(None, alias="status"),
     facilities: Optional[List[int]] = Form(None),
     images: Optional[List[UploadFile]] = File(None),
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
     blob_store: BlobStore = Depends(get_blob_store),
):
     """
     Update the provided fields.

     Sending **facilities** replaces the whole facility set; sending **images**
     replaces every existing image. Leaving either out keeps what is there.
     """
     data = parse_form(
          UnitUpdate,
          floor_id=floor_id,
          room_type_id=room_type_id,
          unit_code=unit_code,
          price_offer=price_offer,
          semi_gross_area=semi_gross_area,
          status=unit_status,
          facilities=facilities,
     )
     unit = UnitService.update_unit(db, caller, unit_id, data, read_uploads(images), blob_store)
     return _build_unit_response(unit)


@router.get(
     "",
     response_model=Page[UnitResponse],
     summary="List units with filters",
)
def list_units(
     unit_code: Optional[str] = Query(None, alias="unitCode", description="Filter by unit code (substring)"),
     room_type_id: Optional[int] = Query(None, alias="roomTypeId", description="Filter by room type ID"),
     facility_id: Optional[int] = Query(None, alias="facilityId", description="Units having this facility"),
     page: Optional[int] = Query(None, ge=1, description="Page number"),
     limit: Optional[int] = Query(None, ge=1, description="Items per page"),
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     result = UnitService.list_units(db, caller, unit_code, room_type_id, facility_id, page, limit)
     return build_page(result, _build_unit_response)


@router.get(
     "/{unit_id}",
     response_model=UnitResponse,
     summary="Get unit by ID",
)
def get_unit(
     unit_id: int,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     return _build_unit_response(UnitService.get_unit(db, caller, unit_id))


@router.delete(
     "/{unit_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete a unit",
)
def delete_unit(
     unit_id: int,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
     blob_store: BlobStore = Depends(get_blob_store),
):
     """Deletes the unit with its images, facility links and reservations."""
     UnitService.delete_unit(db, caller, unit_id, blob_store)
     return None
