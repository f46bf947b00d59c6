# routers/reservations.py
"""
Reservation API routes.

Role-based access:
- Salesman / Supervisor: create reservations, upload payment proofs, read
- Supervisor: book or decline reservations
- Admin: no access
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from azure_blob import BlobStore
from database import get_session
from dependencies import get_blob_store, require_caller
from models import Reservation
from schemas.common import Page, SuccessResponse, build_page
from schemas.reservation import (
     CustomerResponse,
     ReservationCreate,
     ReservationResponse,
     ReservationStatusUpdate,
)
from services.access_control import Caller
from services.reservation_service import ReservationService
from utils.uploads import read_upload

router = APIRouter(prefix="/api/reservations", tags=["reservations"])


def _build_reservation_response(reservation: Reservation) -> ReservationResponse:
     """Build a reservation response with related data."""
     response = ReservationResponse(
          uuid=reservation.uuid,
          unit_id=reservation.unit_id,
          customer_id=reservation.customer_id,
          salesman_id=reservation.salesman_id,
          media_source_category=reservation.media_source_category,
          media_source_desc=reservation.media_source_desc,
          notes=reservation.notes,
          payment_type=reservation.payment_type,
          status=reservation.status,
          payment_proof_url=reservation.payment_proof_url or "",
          created_at=reservation.created_at,
     )

     if reservation.unit:
          response.unit_code = reservation.unit.unit_code
     if reservation.salesman:
          response.salesman_name = reservation.salesman.name
     if reservation.customer:
          response.customer = CustomerResponse.model_validate(reservation.customer)

     return response


@router.post(
     "",
     response_model=ReservationResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Reserve a unit for a new customer",
)
def create_reservation(
     body: ReservationCreate,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     """
     Create the customer and the reservation together.

     The reservation starts as **reserved**; the unit status does not change
     until a payment proof is uploaded.
     """
     reservation = ReservationService.create_reservation(db, caller, body)
     return _build_reservation_response(reservation)


@router.post(
     "/payment-proof",
     response_model=SuccessResponse,
     summary="Upload a payment proof",
)
def upload_payment_proof(
     reservation_uuid: str = Form(..., alias="reservationUuid"),
     payment_proof: UploadFile = File(..., alias="paymentProof"),
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
     blob_store: BlobStore = Depends(get_blob_store),
):
     """Marks the reservation **paid** and its unit **reserved**; replaces any earlier proof."""
     proof = read_upload(payment_proof)
     return ReservationService.upload_payment_proof(db, caller, reservation_uuid, proof, blob_store)


@router.patch(
     "/status",
     response_model=SuccessResponse,
     summary="Book or decline a reservation",
)
def update_reservation_status(
     body: ReservationStatusUpdate,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     """
     Supervisor decision.

     - **booked**: the unit becomes booked
     - **declined**: the unit becomes available again
     """
     return ReservationService.update_status(db, caller, body.reservation_uuid, body.status)


@router.get(
     "",
     response_model=Page[ReservationResponse],
     summary="List reservations",
)
def list_reservations(
     page: Optional[int] = Query(None, ge=1, description="Page number"),
     limit: Optional[int] = Query(None, ge=1, description="Items per page"),
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     result = ReservationService.list_reservations(db, caller, page, limit)
     return build_page(result, _build_reservation_response)


@router.get(
     "/{reservation_uuid}",
     response_model=ReservationResponse,
     summary="Get reservation by UUID",
)
def get_reservation(
     reservation_uuid: str,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     reservation = ReservationService.get_reservation(db, caller, reservation_uuid)
     return _build_reservation_response(reservation)
