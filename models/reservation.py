# models/reservation.py
import enum
import uuid

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin, enum_type


class ReservationStatus(str, enum.Enum):
     """Lifecycle status of a reservation."""
     RESERVED = "reserved"
     PAID = "paid"
     BOOKED = "booked"
     DECLINED = "declined"


class PaymentType(str, enum.Enum):
     """How the customer intends to pay for the unit."""
     CASH = "cash"
     CREDIT = "credit"
     INSTALLMENT = "installment"
     MORTGAGE = "mortgage"


class Reservation(TimestampMixin, Base):
     """
     Reservation model - a customer's claim on a unit.

     Keyed by a random UUID string. The status moves
     reserved -> paid -> booked | declined, and each move also sets the
     status of the referenced unit.
     """
     __tablename__ = "reservations"

     uuid = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
     unit_id = Column(Integer, ForeignKey("units.id", ondelete="CASCADE"), nullable=False, index=True)
     customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, unique=True)
     salesman_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

     media_source_category = Column(String(100), nullable=False)
     media_source_desc = Column(String(255), nullable=False)
     notes = Column(Text, nullable=False, default="")
     payment_type = Column(enum_type(PaymentType, "payment_type"), nullable=False)
     status = Column(
          enum_type(ReservationStatus, "reservation_status"),
          default=ReservationStatus.RESERVED,
          nullable=False,
          index=True
     )
     payment_proof_url = Column(String(500), nullable=False, default="")

     # Relationships
     unit = relationship("Unit", back_populates="reservations")
     customer = relationship("Customer")
     salesman = relationship("User")

     def __repr__(self):
          return f"<Reservation(uuid='{self.uuid}', unit_id={self.unit_id}, status='{self.status.value}')>"
