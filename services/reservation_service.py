# services/reservation_service.py
"""
Reservation Service - reservation lifecycle and unit status transitions.

A reservation moves reserved -> paid -> booked | declined. Every move after
creation also sets the status of the reserved unit, in the same transaction:

     paid      -> unit reserved
     booked    -> unit booked
     declined  -> unit available

Blob deletes are best-effort and are not undone when the transaction rolls back.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session, selectinload

from azure_blob import BlobStore, UploadedFile
from database import transaction
from models import Customer, Reservation, ReservationStatus, Unit, UnitStatus
from schemas.reservation import ReservationCreate
from services.access_control import SALES_ROLES, SUPERVISOR_ONLY, Caller, authorize
from services.errors import BadRequest, NotFound, with_error_handling
from services.pagination import paginate

logger = logging.getLogger(__name__)

# Unit status implied by each reservation status reached after creation
UNIT_STATUS_FOR = {
     ReservationStatus.PAID: UnitStatus.RESERVED,
     ReservationStatus.BOOKED: UnitStatus.BOOKED,
     ReservationStatus.DECLINED: UnitStatus.AVAILABLE,
}

# Statuses a supervisor may set directly
SUPERVISOR_DECISIONS = frozenset({ReservationStatus.BOOKED, ReservationStatus.DECLINED})


def _lock_reservation(db: Session, reservation_uuid: str) -> Reservation:
     reservation = (
          db.query(Reservation)
          .filter(Reservation.uuid == reservation_uuid)
          .with_for_update()
          .first()
     )
     if reservation is None:
          raise NotFound("Reservation not found")
     return reservation


def _set_unit_status(db: Session, unit_id: int, status: UnitStatus) -> None:
     unit = db.get(Unit, unit_id)
     if unit is None:
          raise NotFound("Unit not found")
     unit.status = status


class ReservationService:
     """Service class for the reservation lifecycle."""

     @staticmethod
     @with_error_handling
     def create_reservation(db: Session, caller: Optional[Caller], payload: ReservationCreate) -> Reservation:
          """
          Create a customer and a reservation for them in one transaction.

          The reservation starts as `reserved` with no payment proof; the unit
          status is left untouched.

          Raises:
               NotFound: the unit does not exist (nothing is written)
          """
          caller = authorize(caller, SALES_ROLES)
          details = payload.reservation

          with transaction(db):
               unit = db.get(Unit, details.unit_id)
               if unit is None:
                    raise NotFound(f"Unit with ID {details.unit_id} not found")

               customer = Customer(**payload.customer.model_dump())
               db.add(customer)
               db.flush()  # Flush to get the ID without committing

               reservation = Reservation(
                    unit_id=unit.id,
                    customer_id=customer.id,
                    salesman_id=caller.id,
                    media_source_category=details.media_source_category,
                    media_source_desc=details.media_source_desc,
                    notes=details.notes,
                    payment_type=details.payment_type,
                    status=ReservationStatus.RESERVED,
                    payment_proof_url="",
               )
               db.add(reservation)
               db.flush()

          logger.info("Reservation %s created for unit %s by user %s", reservation.uuid, unit.id, caller.id)
          return reservation

     @staticmethod
     @with_error_handling
     def upload_payment_proof(
          db: Session,
          caller: Optional[Caller],
          reservation_uuid: str,
          proof: UploadedFile,
          blob_store: BlobStore,
     ) -> dict:
          """
          Attach a payment proof, mark the reservation `paid` and the unit `reserved`.

          A previous proof blob is deleted first; failing to delete it is
          logged and does not stop the upload.

          Raises:
               NotFound: the reservation does not exist (nothing is written)
          """
          authorize(caller, SALES_ROLES)

          with transaction(db):
               reservation = _lock_reservation(db, reservation_uuid)

               if reservation.payment_proof_url:
                    blob_store.discard(reservation.payment_proof_url)

               stored = blob_store.store(proof.content, proof.filename)

               reservation.status = ReservationStatus.PAID
               reservation.payment_proof_url = stored.reference
               _set_unit_status(db, reservation.unit_id, UNIT_STATUS_FOR[ReservationStatus.PAID])

          logger.info("Payment proof uploaded for reservation %s", reservation_uuid)
          return {"success": True}

     @staticmethod
     @with_error_handling
     def update_status(
          db: Session,
          caller: Optional[Caller],
          reservation_uuid: str,
          new_status: ReservationStatus,
     ) -> dict:
          """
          Supervisor decision: move a reservation to `booked` or `declined`.

          The previous status is not checked, so a reservation can be booked
          or declined without passing through `paid`.

          Raises:
               BadRequest: new_status is not booked/declined
               NotFound: the reservation does not exist (nothing is written)
          """
          authorize(caller, SUPERVISOR_ONLY)

          try:
               new_status = ReservationStatus(new_status)
          except ValueError:
               raise BadRequest(f"Invalid reservation status: {new_status}")
          if new_status not in SUPERVISOR_DECISIONS:
               raise BadRequest("Status must be either booked or declined")

          with transaction(db):
               reservation = _lock_reservation(db, reservation_uuid)
               previous = reservation.status
               reservation.status = new_status
               _set_unit_status(db, reservation.unit_id, UNIT_STATUS_FOR[new_status])

          logger.info(
               "Reservation %s moved from %s to %s",
               reservation_uuid,
               previous.value,
               new_status.value,
          )
          return {"success": True}

     @staticmethod
     @with_error_handling
     def list_reservations(
          db: Session,
          caller: Optional[Caller],
          page: Optional[int] = None,
          limit: Optional[int] = None,
     ) -> dict:
          """Newest reservations first, with unit, customer and salesman loaded."""
          authorize(caller, SALES_ROLES)
          query = (
               db.query(Reservation)
               .options(
                    selectinload(Reservation.unit),
                    selectinload(Reservation.customer),
                    selectinload(Reservation.salesman),
               )
               .order_by(Reservation.created_at.desc())
          )
          return paginate(query, page, limit)

     @staticmethod
     @with_error_handling
     def get_reservation(db: Session, caller: Optional[Caller], reservation_uuid: str) -> Reservation:
          authorize(caller, SALES_ROLES)
          reservation = (
               db.query(Reservation)
               .options(
                    selectinload(Reservation.unit),
                    selectinload(Reservation.customer),
                    selectinload(Reservation.salesman),
               )
               .filter(Reservation.uuid == reservation_uuid)
               .first()
          )
          if reservation is None:
               raise NotFound("Reservation not found")
          return reservation
