# schemas/reservation.py
"""
Pydantic schemas for reservations and their customers.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from models.reservation import PaymentType, ReservationStatus
from schemas.common import CamelModel


class CustomerCreate(CamelModel):
     """Customer details captured with a new reservation."""
     name: str = Field(..., min_length=1, max_length=200)
     ktp_number: str = Field(..., max_length=50)
     npwp_number: str = Field(..., max_length=50)
     email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
     phone_number: str = Field(..., max_length=50)
     address: str
     city: str = Field(..., max_length=100)
     province: str = Field(..., max_length=100)
     customer_source: str = Field(..., max_length=100)


class ReservationDetails(CamelModel):
     media_source_category: str = Field(..., max_length=100)
     media_source_desc: str = Field(..., max_length=255)
     notes: str = ""
     payment_type: PaymentType
     unit_id: int = Field(..., gt=0)


class ReservationCreate(CamelModel):
     """Request body for POST /api/reservations."""
     customer: CustomerCreate
     reservation: ReservationDetails

     model_config = CamelModel.model_config | {
          "json_schema_extra": {
               "example": {
                    "customer": {
                         "name": "Budi Santoso",
                         "ktpNumber": "3171234567890001",
                         "npwpNumber": "09.254.294.3-407.000",
                         "email": "budi@example.com",
                         "phoneNumber": "+6281234567890",
                         "address": "Jl. Sudirman 1",
                         "city": "Jakarta",
                         "province": "DKI Jakarta",
                         "customerSource": "walk-in",
                    },
                    "reservation": {
                         "mediaSourceCategory": "online",
                         "mediaSourceDesc": "Instagram ad",
                         "notes": "",
                         "paymentType": "mortgage",
                         "unitId": 1,
                    },
               }
          }
     }


class ReservationStatusUpdate(CamelModel):
     """Request body for PATCH /api/reservations/status."""
     reservation_uuid: str
     status: ReservationStatus


class CustomerResponse(CustomerCreate):
     id: int


class ReservationResponse(CamelModel):
     uuid: str
     unit_id: int
     customer_id: int
     salesman_id: int
     media_source_category: str
     media_source_desc: str
     notes: str
     payment_type: PaymentType
     status: ReservationStatus
     payment_proof_url: str = ""
     created_at: Optional[datetime] = None

     # Optional related data
     unit_code: Optional[str] = None
     salesman_name: Optional[str] = None
     customer: Optional[CustomerResponse] = None
