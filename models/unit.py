# models/unit.py
import enum

from sqlalchemy import Column, Integer, String, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin, enum_type


class UnitStatus(str, enum.Enum):
     """Sales status of a unit, driven by its reservations."""
     AVAILABLE = "available"
     RESERVED = "reserved"
     BOOKED = "booked"


class Unit(TimestampMixin, Base):
     """
     Unit model - a sellable space on a floor.
     Owns its images and its facility join rows.
     """
     __tablename__ = "units"

     id = Column(Integer, primary_key=True, autoincrement=True)
     unit_code = Column(String(50), nullable=False, index=True)
     floor_id = Column(Integer, ForeignKey("floors.id", ondelete="CASCADE"), nullable=False, index=True)
     room_type_id = Column(Integer, ForeignKey("room_types.id"), nullable=False, index=True)
     price_offer = Column(Numeric(14, 2), nullable=False)
     semi_gross_area = Column(Numeric(10, 2), nullable=False)
     status = Column(enum_type(UnitStatus, "unit_status"), default=UnitStatus.AVAILABLE, nullable=False, index=True)

     # Relationships
     floor = relationship("Floor", back_populates="units")
     room_type = relationship("RoomType")
     images = relationship("UnitImage", back_populates="unit", cascade="all, delete-orphan", order_by="UnitImage.id")
     facilities = relationship("UnitFacility", back_populates="unit", cascade="all, delete-orphan")
     reservations = relationship("Reservation", back_populates="unit", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Unit(id={self.id}, unit_code='{self.unit_code}', status='{self.status.value}')>"


class UnitImage(TimestampMixin, Base):
     """Image of a unit; image_url is a blob reference owned by the row."""
     __tablename__ = "unit_images"

     id = Column(Integer, primary_key=True, autoincrement=True)
     unit_id = Column(Integer, ForeignKey("units.id", ondelete="CASCADE"), nullable=False, index=True)
     image_url = Column(String(500), nullable=False)
     description = Column(Text, nullable=False, default="")

     unit = relationship("Unit", back_populates="images")

     def __repr__(self):
          return f"<UnitImage(id={self.id}, unit_id={self.unit_id})>"


class UnitFacility(Base):
     """Join row between a unit and a facility."""
     __tablename__ = "unit_facilities"

     unit_id = Column(Integer, ForeignKey("units.id", ondelete="CASCADE"), primary_key=True)
     facility_id = Column(Integer, ForeignKey("facilities.id", ondelete="CASCADE"), primary_key=True)

     unit = relationship("Unit", back_populates="facilities")
     facility = relationship("Facility")

     def __repr__(self):
          return f"<UnitFacility(unit_id={self.unit_id}, facility_id={self.facility_id})>"
